"""Default region reference set: Uttar Pradesh districts."""

from mgnrega.domain.models import Region

UTTAR_PRADESH = "UP"

_UP_DISTRICTS = [
    ("UP_AGRA", "Agra"),
    ("UP_ALIGARH", "Aligarh"),
    ("UP_AZAMGARH", "Azamgarh"),
    ("UP_BAHRAICH", "Bahraich"),
    ("UP_BALLIA", "Ballia"),
    ("UP_BANDA", "Banda"),
    ("UP_BAREILLY", "Bareilly"),
    ("UP_GHAZIABAD", "Ghaziabad"),
    ("UP_GORAKHPUR", "Gorakhpur"),
    ("UP_JHANSI", "Jhansi"),
    ("UP_KANPUR_NAGAR", "Kanpur Nagar"),
    ("UP_LUCKNOW", "Lucknow"),
    ("UP_MATHURA", "Mathura"),
    ("UP_MEERUT", "Meerut"),
    ("UP_MORADABAD", "Moradabad"),
    ("UP_PRAYAGRAJ", "Prayagraj"),
    ("UP_SAHARANPUR", "Saharanpur"),
    ("UP_SITAPUR", "Sitapur"),
    ("UP_UNNAO", "Unnao"),
    ("UP_VARANASI", "Varanasi"),
]

DEFAULT_REGIONS: list[Region] = [
    Region(region_key=key, display_name=name, parent_region_key=UTTAR_PRADESH)
    for key, name in _UP_DISTRICTS
]
