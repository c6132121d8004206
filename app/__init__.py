#!/usr/bin/env python3
"""
API d'administration des rapports d'équipe (membres, tâches, jours fériés).

Point d'entrée ASGI: app.main:app
"""
