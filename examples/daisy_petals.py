"""Example pipeline: generate a single petal ring and inspect its segments."""

import numpy as np

from vector_bloom import PetalGeometry, generate_petals, path_data

GEOMETRY = PetalGeometry(
    width=24,
    count=12,
    length=120,
    inner_width=12,
    outer_width=16,
    smoothing=0.35,
    jitter=4,
)


def main() -> None:
    rng = np.random.default_rng(7)
    petals = generate_petals(GEOMETRY, 40, rng=rng)
    print(f"Petals: {len(petals)}")
    first = petals[0]
    print("First petal nodes:")
    for i, (x, y) in enumerate(first.positions()):
        print(f"  [{i}] ({x:.3f}, {y:.3f})")
    print(f"Path data:\n{path_data(first)}")


if __name__ == "__main__":
    main()
