from . import BloomConfig, generate_bloom, generate_svg, validate, fill_defaults

DEMO = {
    "petals": [
        {
            "geometry": {
                "width": 18,
                "count": 18,
                "length": 242,
                "innerWidth": 10,
                "outerWidth": 8,
                "balance": 0.4,
                "smoothing": 0.3,
                "extendOutside": True,
            },
            "fill": {
                "color": [
                    {"color": "#ffb300", "offset": 0.3},
                    {"color": "#ffe082", "offset": 0.9},
                ],
                "strokeColor": "#8d6e63",
                "strokeWidth": 1,
            },
        },
        {
            "geometry": {
                "width": 14,
                "count": 18,
                "length": 200,
                "angleOffset": 10,
                "smoothing": 0.3,
            },
            "fill": {
                "color": [{"color": "#ff8f00", "offset": 0.5}],
                "shadow": {"blur": 4, "offsetX": 2, "offsetY": 2, "opacity": 0.4},
            },
        },
    ],
    "center": {
        "radius": 180,
        "arrangement": [
            {
                "geometry": {
                    "density": 5.08,
                    "range": [0, 0.85],
                    "size": [1, 5],
                    "age": [0.4, 0.8],
                },
                "fill": {
                    "base": {"color": [{"color": "#4e342e"}]},
                    "tip": {"color": [{"color": "#fbc02d"}]},
                    "background": "#3e2723",
                },
            }
        ],
    },
}


def run():
    config = fill_defaults(BloomConfig.from_dict(DEMO))
    validate(config)
    print(f"Petal groups: {len(config.petals)}")
    print(f"Center arrangements: {len(config.center.arrangement)}")

    geometry = generate_bloom(config)
    for layer, petals in enumerate(geometry.petals):
        print(f"Layer {layer}: {len(petals)} petal(s)")
    for layer, arrangement in enumerate(geometry.center):
        print(f"Arrangement {layer}: {len(arrangement.bases)} base(s), {len(arrangement.tips)} tip(s)")

    svg = generate_svg(geometry, flower_id="demo")
    print(f"SVG markup: {len(svg)} characters")


if __name__ == "__main__":
    run()
