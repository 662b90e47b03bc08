"""Adapters layer - Concrete implementations of the ports.

- store: in-memory and CSV location/route stores
- rendering: Folium network map
"""
