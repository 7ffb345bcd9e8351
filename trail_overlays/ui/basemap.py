"""Raster basemap for the 2D map using free OpenStreetMap tiles.

Why a map_style dict instead of TileLayer?
- pydeck's TileLayer only fetches tiles, rendering them needs a JavaScript
  renderSubLayers callback that pydeck does not expose to Python
- deck.gl natively understands the Mapbox GL style spec for raster sources
- Requires map_provider="mapbox" in pdk.Deck() (no API key needed for raster)

No API key required. Attribution: © OpenStreetMap contributors.
"""

OSM_TILES_ABC = [
    "https://a.tile.openstreetmap.org/{z}/{x}/{y}.png",
    "https://b.tile.openstreetmap.org/{z}/{x}/{y}.png",
    "https://c.tile.openstreetmap.org/{z}/{x}/{y}.png",
]

OSM_STYLE: dict[str, object] = {
    "version": 8,
    "sources": {
        "osm": {
            "type": "raster",
            "tiles": OSM_TILES_ABC,
            "tileSize": 256,
            "attribution": '© <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors',
        }
    },
    "layers": [
        {
            "id": "osm",
            "type": "raster",
            "source": "osm",
            "minzoom": 0,
            "maxzoom": 19,
        }
    ],
}

MAP_PROVIDER = "mapbox"  # Required when map_style is a dict
