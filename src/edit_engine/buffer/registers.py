"""Clipboard registers holding cut/copy payloads outside the document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

UNNAMED = '"'


@dataclass(frozen=True, slots=True)
class RegisterValue:
    data: bytes = b""

    def __bool__(self) -> bool:
        return bool(self.data)


class RegisterBank:
    """Named byte registers; writes to any register also fill the unnamed one."""

    def __init__(self) -> None:
        self._registers: Dict[str, RegisterValue] = {UNNAMED: RegisterValue()}

    def get(self, name: str = UNNAMED) -> RegisterValue:
        return self._registers.get(name, RegisterValue())

    def set(self, name: str, value: RegisterValue) -> None:
        self._registers[name] = value
        if name != UNNAMED:
            self._registers[UNNAMED] = value

    def yank_to(self, name: str, data: bytes) -> None:
        self.set(name, RegisterValue(data=bytes(data)))
        self.clipboard_set(bytes(data))

    def paste_from(self, name: str = UNNAMED) -> RegisterValue:
        external = self.clipboard_get()
        if external is not None and name == UNNAMED:
            return RegisterValue(data=external)
        return self.get(name)

    def clipboard_get(self) -> Optional[bytes]:  # hosts override to read the OS clipboard
        return None

    def clipboard_set(self, data: bytes) -> None:  # hosts override to write the OS clipboard
        del data


__all__ = ["UNNAMED", "RegisterValue", "RegisterBank"]
