import sys
from pathlib import Path

import pytest

# Ensure `src` is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def hp_geometry():
    from voyager_overlay.utils.pdf.core.layout_common import HP_GEOMETRY

    return HP_GEOMETRY


@pytest.fixture
def reg_geometry():
    from voyager_overlay.utils.pdf.core.layout_common import CAMEO4_NO_MAT_REG_GEOMETRY

    return CAMEO4_NO_MAT_REG_GEOMETRY


@pytest.fixture
def stream():
    from voyager_overlay.utils.pdf.core.content_stream import ContentStream

    return ContentStream(push_graphics_state=True)

