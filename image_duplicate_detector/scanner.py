"""
Run the duplicate search on a worker thread while the console shows progress.
"""

import queue
import threading
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .grouper import Scorer, find_duplicates
from .scorer import compare_images


class ScanError(RuntimeError):
    """Raised when the background scan fails."""


class ScanCancelled(Exception):
    """Raised inside the worker once a stop has been requested."""


class ScanWorker:
    """Single background worker that groups duplicates and reports progress."""

    def __init__(self, paths: List[Path], threshold: float, scorer: Scorer = compare_images):
        self.paths = paths
        self.threshold = threshold
        self.scorer = scorer
        self.message_queue = queue.Queue()
        self.stop_event = threading.Event()
        self.scan_thread: Optional[threading.Thread] = None

    def start(self):
        """Start the scan in a separate thread."""
        self.scan_thread = threading.Thread(target=self._scan_worker, daemon=True)
        self.scan_thread.start()

    def stop(self):
        """Ask the worker to give up at the next pair."""
        self.stop_event.set()

    def join(self):
        if self.scan_thread is not None:
            self.scan_thread.join()

    def _progress(self, level: str, percent: int):
        if self.stop_event.is_set():
            raise ScanCancelled()
        self.message_queue.put({'type': 'progress', 'level': level, 'percent': percent})

    def _scan_worker(self):
        """Worker thread for scanning duplicates."""
        try:
            duplicates = find_duplicates(self.paths, self.threshold,
                                         scorer=self.scorer, progress=self._progress)
            self.message_queue.put({'type': 'complete', 'duplicates': duplicates})
        except ScanCancelled:
            self.message_queue.put({'type': 'cancelled'})
        except Exception as e:
            self.message_queue.put({'type': 'error', 'error': str(e)})


def _make_bars(show_progress: bool):
    bar_format = "{desc}[{bar:50}] {percentage:3.0f}% [{elapsed}]"
    parent = tqdm(total=100, desc="Parent Progress", position=0,
                  bar_format=bar_format, disable=not show_progress)
    child = tqdm(total=100, desc="Child Progress ", position=1,
                 bar_format=bar_format, disable=not show_progress)
    return {'outer': parent, 'inner': child}


def run_scan(paths: List[Path], threshold: float, scorer: Scorer = compare_images,
             show_progress: bool = True) -> List[List[Path]]:
    """
    Group duplicates in the background and block until the scan is done.

    Args:
        paths: Candidate image paths
        threshold: Similarity threshold
        scorer: Pair scorer handed to the grouper
        show_progress: Render the parent/child progress bars

    Returns:
        List of duplicate groups

    Raises:
        ScanError: if the worker failed
        KeyboardInterrupt: after asking the worker to stop; it is not joined
    """
    worker = ScanWorker(paths, threshold, scorer=scorer)
    bars = _make_bars(show_progress)
    worker.start()

    result = None
    try:
        while result is None:
            # Poll so Ctrl-C is seen even while a slow pair is being scored
            try:
                message = worker.message_queue.get(timeout=0.1)
            except queue.Empty:
                continue
            msg_type = message.get('type')

            if msg_type == 'progress':
                bar = bars[message['level']]
                bar.n = message['percent']
                bar.refresh()
            else:
                result = message
    except KeyboardInterrupt:
        # The daemon worker is abandoned; it stops at its next pair
        worker.stop()
        raise
    finally:
        for bar in bars.values():
            bar.close()

    worker.join()
    if result['type'] == 'error':
        raise ScanError(result['error'])
    return result['duplicates']
