"""
Couche application (cas d'utilisation).

Les services orchestrent le domaine pour repondre aux commandes du bot.
Ils dependent des ports de core/, jamais des implementations concretes
des adaptateurs.

Contenu :
- dispatcher.py : aiguillage des messages (etat de conversation puis commande)
- handlers.py : une coroutine par commande
- conversation.py : suivi en memoire des ajouts de series en attente
- formatting.py : textes des reponses (Markdown)
- ranking.py : classement par popularite
- episodes.py : validation des numeros d'episode
"""
