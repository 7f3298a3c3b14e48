"""Example pipeline: phyllotactic center written out as an SVG file."""

import sys
from pathlib import Path

from vector_bloom import BloomConfig, generate_bloom, generate_svg_document, validate

CONFIG = {
    "center": {
        "radius": 120,
        "arrangement": [
            {
                "geometry": {"density": 4, "range": [0, 0.6], "size": [1, 4], "age": [0.3, 0.9]},
                "fill": {
                    "base": {"color": [{"color": "#5d4037"}, {"color": "#3e2723", "offset": 1}]},
                    "tip": {"color": [{"color": "#fdd835"}], "shadow": {"blur": 1.5, "opacity": 0.5}},
                    "background": "#4e342e",
                },
            },
            {
                "geometry": {"density": 4, "range": [0.6, 1], "size": [4, 6], "age": [0.9, 1.2]},
                "fill": {"base": {"color": [{"color": "#6d4c41"}]}, "tip": {"color": [{"color": "#ffee58"}]}},
            },
        ],
    }
}


def main(out_path: str = "sunflower_center.svg") -> None:
    config = BloomConfig.from_dict(CONFIG)
    validate(config)
    geometry = generate_bloom(config)
    for layer, arrangement in enumerate(geometry.center):
        ages = [floret.age for floret in arrangement.florets]
        print(
            f"Arrangement {layer}: {len(arrangement.florets)} floret(s), "
            f"{len(arrangement.tips)} tip(s), age {min(ages):.2f}..{max(ages):.2f}"
        )
    Path(out_path).write_text(generate_svg_document(geometry, flower_id="sunflower"), encoding="utf-8")
    print(f"SVG written to {out_path}")


if __name__ == "__main__":
    main(*sys.argv[1:])
