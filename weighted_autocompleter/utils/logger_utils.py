# logger_utils.py -  for logging messages and performance metrics, timestamps etc

import os
import time
from datetime import datetime
from typing import Optional, TextIO
import sys

# Directory used when a caller asks for the default log file
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocompleter.log")

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    # file used by the static metric() helper, None = console only
    metric_path: Optional[str] = None

    def __init__(self, path: Optional[str] = None, use_color: bool = True,
                 stream: Optional[TextIO] = None, level: str = "DEBUG"):
        self.path = path
        self.use_color = use_color
        self.stream = stream
        self.level = level.upper()
        if self.level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        if self.path:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if LEVELS.index(level) < LEVELS.index(self.level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        # print to console (color enabled etc)
        out = self.stream or sys.stdout
        if self.use_color and level in self.COLORS:
            out.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            out.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Prints to the console and also logs it to Log.metric_path if set.
        Example: [12:45:02] trie build done: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        print(line)
        if Log.metric_path:
            with open(Log.metric_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("trie build") as t:
                TrieEngine(words, weights)
            t.elapsed  # seconds
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric. """
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
