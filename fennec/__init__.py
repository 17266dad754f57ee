"""
Fennec FC Management Service - record backend for the club

Responsibilities:
- Player roster (CRUD, unique jersey numbers)
- Teams built from existing players
- Tournaments built from existing teams
- Read-time expansion of player/team references
"""
