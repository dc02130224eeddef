"""
WatchBot - Bot Telegram de suivi des films et séries vus.

Ce package permet d'enregistrer ses visionnages, de consulter son historique,
de chercher dans le catalogue TMDB et d'afficher le top de la semaine.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, erreurs)
- services/ : Couche application (commandes, conversations, mise en forme)
- adapters/ : Couche infrastructure (client TMDB, transport Telegram)
- infrastructure/ : Persistance SQLite (SQLModel)
"""
