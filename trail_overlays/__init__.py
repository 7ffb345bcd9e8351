"""Trail Overlays - Interactive map with a hiking trail and a park outline.

Shows a trail polyline and a park polygon on a pydeck map. Clicking either
overlay opens an info dialog; the settings button opens a dialog for overlay
colors and widths.

Modules:
    model: Data structures (GeoPoint, geometry, styles, dialogs, clicks)
    ui: Streamlit interface components (state machine, view tree, map, dialogs)

Run: streamlit run trail_overlays/app.py
"""
