# renderer/scheduler.py
# Chunked FIFO of pixels, a fixed pool of worker threads and one collector
# that is the only writer of the pixel buffer.
import os
import queue
import threading
import time
from collections import deque
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple
import numpy as np

DEFAULT_CHUNK_SIZE = 1024

RGB = Tuple[int, int, int]


class RenderError(RuntimeError):
    """Raised when a worker fails; the render is abandoned."""


class Pixel(NamedTuple):
    index: int
    row: int
    column: int


class Chunk(NamedTuple):
    number: int
    pixels: List[Pixel]


def enumerate_pixels(width: int, height: int) -> List[Pixel]:
    """All pixel coordinates, top row first, tagged with their buffer index."""
    return [Pixel(row * width + column, row, column)
            for row in range(height)
            for column in range(width)]


def partition(pixels: List[Pixel], chunk_size: int = DEFAULT_CHUNK_SIZE) -> List[Chunk]:
    """Split pixels into consecutive chunks of at most chunk_size entries."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
    return [Chunk(number, pixels[start:start + chunk_size])
            for number, start in enumerate(range(0, len(pixels), chunk_size))]


def default_workers() -> int:
    return os.cpu_count() or 1


def render_chunks(chunks: Iterable[Chunk], shade: Callable[[Pixel], RGB],
                  pixel_count: int, workers: Optional[int] = None,
                  verbose: bool = False) -> np.ndarray:
    """
    Shade every pixel of every chunk on a pool of worker threads.

    Returns a (pixel_count, 3) uint8 buffer in index order. Any exception
    raised by shade() aborts the render with RenderError.
    """
    if workers is None:
        workers = default_workers()
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    jobs = deque(chunks)
    jobs_lock = threading.Lock()
    results: "queue.Queue" = queue.Queue()
    abort = threading.Event()

    def worker():
        while not abort.is_set():
            with jobs_lock:
                if not jobs:
                    break
                chunk = jobs.popleft()
            if verbose:
                print(f"Started chunk: {chunk.number} - {threading.current_thread().name}")
            # Replaced unless a BaseException escapes shade()
            outcome = RenderError(f"{threading.current_thread().name} was interrupted")
            try:
                outcome = [(pixel.index, shade(pixel)) for pixel in chunk.pixels]
            except Exception as e:
                outcome = e
            finally:
                # The collector expects exactly one message per chunk
                results.put((chunk.number, outcome))
            if isinstance(outcome, Exception):
                return
            if verbose:
                print(f"Chunk {chunk.number} completed")

    expected = len(jobs)
    pixels = np.zeros((pixel_count, 3), dtype=np.uint8)

    start = time.perf_counter()
    threads = [threading.Thread(target=worker, name=f"render-worker-{n}", daemon=True)
               for n in range(min(workers, max(expected, 1)))]
    for t in threads:
        t.start()

    # Collector: sole writer of the pixel buffer
    failure = None
    for _ in range(expected):
        number, payload = results.get()
        if isinstance(payload, Exception):
            failure = (number, payload)
            abort.set()
            break
        for index, rgb in payload:
            pixels[index] = rgb

    for t in threads:
        t.join()

    if failure is not None:
        number, error = failure
        raise RenderError(f"worker failed on chunk {number}: {error}") from error

    if verbose:
        print(f"Elapsed: {time.perf_counter() - start:.2f}s")
    return pixels
