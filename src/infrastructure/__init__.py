"""
Couche infrastructure d'AppReg.

Ce module contient les implementations concretes des ports de stockage
definis dans la couche domaine :

- persistence/ : Stockage SQLite avec SQLModel (modeles et repositories)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation (ex: PostgreSQL au lieu de SQLite)
sans modifier la logique metier.
"""
