"""Single-slot audio playback."""

import shutil
import subprocess
from pathlib import Path
from typing import Protocol

# Command-line players tried in order, with the flags that make them exit
# when playback ends and stay off the terminal.
PLAYER_COMMANDS = [
    ["ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet"],
    ["mpg123", "-q"],
    ["afplay"],
]


class AudioHandle(Protocol):
    """Something that is playing and can be stopped."""

    def stop(self) -> None: ...


class AudioSlot:
    """Holds at most one playing audio handle.

    A new handle always stops the previous one before taking its place.
    Stopping does not cancel a synthesis call that is still in flight; it
    only ends playback.
    """

    def __init__(self):
        self._current: AudioHandle | None = None

    @property
    def current(self) -> AudioHandle | None:
        return self._current

    @property
    def is_playing(self) -> bool:
        return self._current is not None

    def replace(self, handle: AudioHandle) -> AudioHandle:
        """Stop what is playing, then hold ``handle``."""
        self.stop()
        self._current = handle
        return handle

    def stop(self) -> None:
        """Stop and release the held handle, if any."""
        handle, self._current = self._current, None
        if handle is not None:
            handle.stop()

    def release(self, handle: AudioHandle) -> None:
        """Forget ``handle`` if it is still the one held (playback ended)."""
        if self._current is handle:
            self._current = None


def find_player() -> list[str] | None:
    """First available command-line audio player, if any."""
    for command in PLAYER_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


class SubprocessPlayback:
    """An MP3 file being played by an external player process."""

    def __init__(self, path: Path, command: list[str] | None = None):
        command = command or find_player()
        if command is None:
            raise RuntimeError("No audio player found (install ffplay, mpg123 or afplay)")
        self.path = path
        self.process = subprocess.Popen(
            [*command, str(path)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    def wait(self) -> int:
        return self.process.wait()

    def stop(self) -> None:
        if self.process.poll() is None:
            self.process.terminate()
            try:
                self.process.wait(timeout=5)
            except subprocess.TimeoutExpired:
                self.process.kill()
