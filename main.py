from __future__ import annotations

from api import run

CANVAS_SIZE = (800, 600)


if __name__ == "__main__":
    run(canvas_size=CANVAS_SIZE)
