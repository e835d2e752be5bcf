"""Line-based communication with an external UCI engine process."""

import os
import subprocess

from .errors import ChessError


class UciEngine:
    """A running UCI engine child process."""

    def __init__(self, path) -> None:
        self._path = os.fspath(path)
        try:
            self._process = subprocess.Popen(
                [self._path],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as exc:
            raise ChessError(f"UciEngine: failed to start engine: {self._path}") from exc
        self._to_engine = self._process.stdin
        self._from_engine = self._process.stdout

    def send(self, command: str) -> None:
        """Send one command line to the engine."""
        if self._to_engine is None:
            raise ChessError("UciEngine: engine not running")
        try:
            self._to_engine.write(command + "\n")
            self._to_engine.flush()
        except OSError as exc:
            raise ChessError("UciEngine: engine closed connection") from exc

    def read_line(self) -> str:
        """Read one line from the engine, without its line ending."""
        if self._from_engine is None:
            raise ChessError("UciEngine: engine not running")
        line = self._from_engine.readline()
        if not line:
            raise ChessError("UciEngine: engine closed connection")
        return line.rstrip("\r\n")

    def read_until(self, token: str) -> str:
        """Read lines until one starts with token and return that line."""
        while True:
            line = self.read_line()
            if line.startswith(token):
                return line

    def init_uci(self) -> None:
        self.send("uci")
        self.read_until("uciok")

    def set_option(self, name: str, value: str) -> None:
        self.send(f"setoption name {name} value {value}")

    def new_game(self) -> None:
        self.send("ucinewgame")
        self.send("isready")
        self.read_until("readyok")

    def go(self, params: str) -> str:
        """Start a search and return the best move, or "" if none was given."""
        self.send(f"go {params}")
        line = self.read_until("bestmove")
        start = line.find(" ")
        if start < 0:
            return ""
        end = line.find(" ", start + 1)
        if end < 0:
            return line[start + 1 :]
        return line[start + 1 : end]

    def close(self) -> None:
        """Ask the engine to quit and release the process."""
        if self._to_engine is not None:
            try:
                self._to_engine.write("quit\n")
                self._to_engine.flush()
            except OSError:
                pass
            try:
                self._to_engine.close()
            except OSError:
                pass
            self._to_engine = None
        if self._from_engine is not None:
            self._from_engine.close()
            self._from_engine = None
        if self._process is not None:
            try:
                self._process.wait(timeout=3)
            except subprocess.TimeoutExpired:
                self._process.kill()
                self._process.wait()
            self._process = None

    def __enter__(self) -> "UciEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()