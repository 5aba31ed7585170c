# Google Static Maps styling  (muted roadmap, no POI / transit clutter)

MAP_FORMAT = "png"
MAP_TYPE   = "roadmap"

STYLE_RULES = (
    "feature:landscape.man_made|element:geometry|color:0xf7f1df",
    "feature:landscape.natural|element:geometry|color:0xd0e3b4",
    "feature:landscape.natural.terrain|element:geometry|visibility:off",
    "feature:poi|element:labels|visibility:off",
    "feature:poi.business|visibility:off",
    "feature:poi.medical|element:geometry|color:0xfbd3da",
    "feature:poi.park|element:geometry|color:0xbde6ab",
    "feature:road|element:geometry.stroke|visibility:off",
    "feature:road|element:labels|visibility:off",
    "feature:road.arterial|element:geometry.fill|color:0xffffff",
    "feature:road.highway|element:geometry.fill|color:0xffe15f",
    "feature:road.highway|element:geometry.stroke|color:0xefd151",
    "feature:road.local|element:geometry.fill|color:0xffffff",
    "feature:transit|element:labels.icon|visibility:off",
    "feature:transit|element:labels.text|visibility:off",
    "feature:transit.station.airport|element:geometry.fill|color:0xcfb2db",
    "feature:transit.station.bus|visibility:off",
    "feature:water|element:geometry|color:0xa2daf2",
)

# outline drawn around the location
PATH_STYLE = "color:0x00000077|weight:1|fillcolor:0xAA000033"

STYLE = "&" + "&".join(
    [f"format={MAP_FORMAT}", f"maptype={MAP_TYPE}"]
    + [f"style={rule}" for rule in STYLE_RULES]
)
