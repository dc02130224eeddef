"""
Couche infrastructure de WatchBot.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) pour le stockage :

- persistence/ : Stockage SQLite avec SQLModel (modele, schema, repository)

Architecture hexagonale : changer de base (ex: PostgreSQL au lieu de SQLite)
ne touche pas la logique metier.
"""
