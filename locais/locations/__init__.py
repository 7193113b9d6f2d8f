"""
Location catalogue.

Responsibilities:
- Hold location documents (title, media, coordinates, category tags, votes).
- Seed the catalogue from a JSON file on startup.
- Apply like/dislike votes as atomic counter increments.
"""
