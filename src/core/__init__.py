"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites) et exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Application, Customer, Notification)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
