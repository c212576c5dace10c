"""Bingo domain services: boards, calls, win checks and the room registry.

This package contains the game rules that the Socket.IO handlers and HTTP
routes call into, keeping transport concerns separated from core game
mechanics.
"""
