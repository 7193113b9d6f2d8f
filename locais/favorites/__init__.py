"""
Favorites manager.

Responsibilities:
- Resolve a user's favorite references to full location records.
- Add a favorite once, after checking the location exists.
- Remove a favorite; removing one that is absent succeeds.
"""
