"""
AppReg - Gestion des demandes d'inscription.

Ce package enregistre les demandes d'inscription, fait expirer les demandes
trop anciennes et previent le demandeur lorsque sa demande expire.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- services/ : Couche application (cas d'utilisation, orchestration)
- infrastructure/ : Persistance SQLModel
- adapters/ : Adaptateurs concrets (notifications, horloge, CLI)
"""
