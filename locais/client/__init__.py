"""
Client-side data and filtering layer.

Responsibilities:
- Talk to the Locais REST API (locations, votes, login, favorites).
- Compute great-circle distances and filter locations by category,
  amenity and radius.
- Build map-marker and grid-card render inputs in an explicit context
  owned by the controller.
"""
