"""Shared pytest fixtures for SpriteLab tests."""

import base64
import io

import httpx
import numpy as np
import pytest
from PIL import Image


# =============================================================================
# Bitmap Fixtures
# =============================================================================


def _make_sheet(width, height, squares=(), color=(255, 0, 0, 255)):
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for x, y, w, h in squares:
        pixels[y:y + h, x:x + w] = color
    return pixels


def _to_png(pixels) -> bytes:
    buffer = io.BytesIO()
    Image.fromarray(pixels).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def make_sheet():
    """Factory: transparent RGBA array with opaque (x, y, w, h) squares."""
    return _make_sheet


@pytest.fixture
def to_png():
    """Factory: encode an RGBA array as PNG bytes."""
    return _to_png


@pytest.fixture
def two_squares_sheet():
    """1024x1024 sheet with two 100x100 squares at (50,50) and (200,50)."""
    return _make_sheet(1024, 1024, [(50, 50, 100, 100), (200, 50, 100, 100)])


@pytest.fixture
def grid_sheet():
    """1000x1000 sheet with two rows of five 60x60 sprites (idle row, walk row)."""
    squares = []
    for row in range(2):
        for col in range(5):
            squares.append((col * 200 + 70, row * 200 + 70, 60, 60))
    return _make_sheet(1000, 1000, squares)


@pytest.fixture
def sheet_png(grid_sheet):
    """PNG bytes of grid_sheet (has transparency)."""
    return _to_png(grid_sheet)


@pytest.fixture
def opaque_png():
    """PNG bytes of a fully opaque image."""
    return _to_png(np.full((64, 64, 4), 255, dtype=np.uint8))


# =============================================================================
# Upstream Service Fixtures
# =============================================================================


def image_payload(png: bytes) -> dict:
    """OpenAI images response body carrying png."""
    return {"created": 0, "data": [{"b64_json": base64.b64encode(png).decode("ascii")}]}


@pytest.fixture
def fake_openai():
    """
    Scripted stand-in for the images endpoint.

    Queue responses with .add(); each request pops the next one (the last
    response repeats). Requests are recorded in .requests.
    """
    class FakeOpenAI:
        def __init__(self):
            self.responses = []
            self.requests = []

        def add_image(self, png: bytes):
            self.responses.append(httpx.Response(200, json=image_payload(png)))
            return self

        def add(self, response: httpx.Response):
            self.responses.append(response)
            return self

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            queued = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
            return httpx.Response(queued.status_code, headers=queued.headers, content=queued.content)

        @property
        def transport(self) -> httpx.MockTransport:
            return httpx.MockTransport(self.handler)

    return FakeOpenAI()
