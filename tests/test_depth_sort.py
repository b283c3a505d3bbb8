from isorelief.surface.depth import DepthMode, centroid_depth, depth_sort_triangles
from isorelief.surface.mesh import SurfaceTriangle


def _tri(depth, ys=(0.0, 0.0, 0.0), tag=0):
    return SurfaceTriangle(
        a=(0.0, ys[0]), b=(1.0, ys[1]), c=(0.0, ys[2]),
        value=float(tag), shade=0.75, depth=depth, row=tag, col=0, upper=True,
    )


def test_heuristic_sorts_back_to_front():
    tris = [_tri(2.0, tag=0), _tri(0.2, tag=1), _tri(0.0, tag=2), _tri(1.2, tag=3)]
    out = depth_sort_triangles(tris)
    assert [t.depth for t in out] == [0.0, 0.2, 1.2, 2.0]


def test_ties_keep_build_order():
    tris = [_tri(1.0, tag=i) for i in range(5)]
    out = depth_sort_triangles(tris)
    assert [t.row for t in out] == [0, 1, 2, 3, 4]


def test_front_to_back_reverses():
    tris = [_tri(0.0, tag=0), _tri(3.0, tag=1)]
    out = depth_sort_triangles(tris, back_to_front=False)
    assert [t.depth for t in out] == [3.0, 0.0]


def test_centroid_mode_orders_by_screen_y():
    near = _tri(0.0, ys=(90.0, 90.0, 90.0), tag=0)
    far = _tri(5.0, ys=(10.0, 12.0, 14.0), tag=1)
    assert centroid_depth(far) == 12.0
    out = depth_sort_triangles([near, far], mode=DepthMode.CENTROID)
    assert out == [far, near]


def test_input_not_mutated():
    tris = [_tri(2.0), _tri(1.0)]
    depth_sort_triangles(tris)
    assert [t.depth for t in tris] == [2.0, 1.0]
