"""Demo script: render a Pythagoras cuboid and an angle-sum hexagon."""

from pathlib import Path

from shapescene import (
    angle_sum_polygon,
    cuboid_scene,
    polygon_scene,
    pythagoras_cuboid,
)
from shapescene.geometry import PolygonGeometryOps, SolidGeometryOps

OUTPUT = Path(__file__).resolve().parent


def main():
    spec, vis = pythagoras_cuboid(
        show_base_diagonal=True, show_space_diagonal=True, show_vertices=True,
    )
    scene = cuboid_scene(spec, vis)
    print(f"Cuboid: {len(scene)} primitives")
    print(f"Space diagonal: {SolidGeometryOps.space_diagonal(4, 3, 5):.2f} cm")
    scene.render_mpl(output=OUTPUT / "cuboid.svg", show=False)

    spec, vis = angle_sum_polygon(sides=6)
    scene = polygon_scene(spec, vis)
    print(f"Hexagon: {len(scene)} primitives")
    print(f"Interior angle sum: {PolygonGeometryOps.sum_of_interior_angles(6)}°")
    scene.render_mpl(output=OUTPUT / "hexagon.svg", show=False)
    print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
