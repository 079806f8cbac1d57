"""Service layer package for the Have to do app.

services.state holds the application state and its reducer; services.notes
holds the NoteController that applies actions and talks to the database.
"""
