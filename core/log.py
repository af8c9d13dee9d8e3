################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the in-memory application log for FlowPad.

'''

################################################################################################

import inspect
from datetime import datetime
from typing import List, Optional, Tuple

################################################################################################

TIMESTAMP_FMT = "%m/%d/%Y %H:%M:%S"

def _now() -> str:
    return datetime.now().strftime(TIMESTAMP_FMT)

class LogManager():
    """
    Shared log of (timestamp, message) pairs.

    Every instance appends to the same class-level list; the instance only
    carries the verbosity used to gate debug() messages.
    """
    __log: Optional[List[Tuple[str, str]]] = None

    def __init__(self, verbosity: int = 0):
        if LogManager.__log is None:
            LogManager.__log = [(_now(), "Begin FlowPad Log")]
        self.verbosity = verbosity

    def add(self, text: str):
        LogManager.__log.append((_now(), text))

    def debug(self, text: str, level: int = 0):
        if self.verbosity < level:
            return

        # Tag with the calling module's file name
        stack = inspect.stack()
        if len(stack) > 1:
            filename = stack[1].filename.replace("\\", "/").split('/')[-1]
        else:
            filename = "unknown"
        self.add(f"[{filename}] {text}")

    def get(self, index: int = None):
        if index is not None:
            return LogManager.__log[index]
        return LogManager.__log.copy()

    def messages(self) -> List[str]:
        """Message text only, oldest first."""
        return [msg for _ts, msg in LogManager.__log]

    def count(self):
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Drop all entries, leaving a single marker line."""
        LogManager.__log.clear()
        LogManager.__log.append((_now(), "Log cleared"))

    def write_to_file(self, filepath: str) -> bool:
        """Dump the log to a text file. Failures are logged, not raised."""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for timestamp, message in LogManager.__log:
                    f.write(f"[{timestamp}] {message}\n")
        except OSError as e:
            self.add(f"Failed to write log to '{filepath}': {e}")
            return False
        self.add(f"Log written to file: {filepath}")
        return True

################################################################################################

Log = LogManager()

################################################################################################
