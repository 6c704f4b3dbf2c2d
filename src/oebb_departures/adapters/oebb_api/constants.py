"""Constants for the ÖBB station board adapter.

The board is served by the HAFAS "stboard" endpoint in its legacy
``vs_java3`` layout: a text body with one ``<Journey .../>`` tag per service.
"""

OEBB_BOARD_URL = "https://fahrplan.oebb.at/bin/stboard.exe/dn"

# Query parameters that stay the same for every request
BOARD_LAYOUT = "vs_java3"
BOARD_TYPE = "dep"
# Rail products only (no buses, ferries or on-demand services)
PRODUCTS_FILTER = "1111110000011"
