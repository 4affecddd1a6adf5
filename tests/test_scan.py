import pytest

from terrainkit.scan import ScanConvertBackend, ScanConverter, ScanEdge


class RecordingBackend(ScanConvertBackend):
    def __init__(self, width, height):
        super().__init__(width, height)
        self.spans = []
        self.subdivided = []

    def scan_convert_backend(self, y, edge0, edge1):
        self.spans.append((y, edge0, edge1))

    def subdivide(self, vertices, point, converter):
        self.subdivided.append((tuple(vertices), point))
        for i in range(3):
            part = list(vertices)
            part[i] = point
            converter.scan_convert(part, self)


class RowPerVertexConverter(ScanConverter):
    def scan_convert(self, vertices, backend):
        for i, v in enumerate(vertices):
            backend.scan_convert_backend(
                int(v[1]), ScanEdge(v[0], i, i, 0.0), ScanEdge(v[0] + 1.0, i, (i + 1) % 3, 1.0)
            )


def test_scan_edge_fields():
    e = ScanEdge(2.5, 0, 2, 0.25)
    assert (e.x, e.vertex0, e.vertex1, e.lambda_) == (2.5, 0, 2, 0.25)


def test_backend_reports_size():
    backend = RecordingBackend(640, 480)
    assert (backend.width, backend.height) == (640, 480)
    ScanConvertBackend.__init__(backend, 320, 200)
    assert (backend.width, backend.height) == (320, 200)


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ScanConvertBackend(10, 10)
    with pytest.raises(TypeError):
        ScanConverter()


def test_converter_drives_backend():
    backend = RecordingBackend(8, 8)
    tri = [(1.0, 2.0, 0.0), (3.0, 4.0, 0.0), (5.0, 6.0, 0.0)]
    RowPerVertexConverter().scan_convert(tri, backend)
    assert [span[0] for span in backend.spans] == [2, 4, 6]
    assert backend.spans[1][2] == ScanEdge(4.0, 1, 2, 1.0)


def test_subdivide_uses_converter_for_each_part():
    backend = RecordingBackend(8, 8)
    tri = [(0.0, 0.0, 0.0), (4.0, 0.0, 0.0), (0.0, 4.0, 0.0)]
    backend.subdivide(tri, (1.0, 1.0, 0.0), RowPerVertexConverter())
    assert len(backend.subdivided) == 1
    assert len(backend.spans) == 9
    assert backend.spans[0] == (1, ScanEdge(1.0, 0, 0, 0.0), ScanEdge(2.0, 0, 1, 1.0))