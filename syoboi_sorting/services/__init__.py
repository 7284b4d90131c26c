"""
Couche services (cas d'utilisation).

Les services orchestrent la logique du domaine :
- SorterService : rangement des fichiers par programme
- SortingWorkflow : enchainement catalogue -> tri

Les services dependent des ports (interfaces) de core/, jamais des
implementations concretes de adapters/.
"""
