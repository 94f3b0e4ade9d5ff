"""OpenStreetMap raster basemap for the pydeck map.

Uses the Mapbox GL style specification to define a custom raster basemap.
pydeck's TileLayer alone only fetches tiles but doesn't render them (it
requires a renderSubLayers callback that pydeck doesn't expose to Python),
so the tiles are declared as a map_style dict instead.

Requires map_provider="mapbox" in pdk.Deck() (works without API key for raster).
No API key required.
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
