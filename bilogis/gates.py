"""Two-input logic gates and a factory that builds them by name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Gate:
    """A gate with two boolean inputs; the base gate always outputs False."""

    in1: bool = False
    in2: bool = False
    kind: ClassVar[str] = ""

    def output(self) -> bool:
        """Return the value currently on the gate's output."""
        return False


class AndGate(Gate):
    kind = "AND"

    def output(self) -> bool:
        return self.in1 and self.in2


class NandGate(Gate):
    kind = "NAND"

    def output(self) -> bool:
        return not (self.in1 and self.in2)


class NorGate(Gate):
    kind = "NOR"

    def output(self) -> bool:
        return not (self.in1 or self.in2)


class NotGate(Gate):
    """Inverter: outputs True when either input is low."""

    kind = "NOT"

    def output(self) -> bool:
        return (not self.in1) or (not self.in2)


class OrGate(Gate):
    kind = "OR"

    def output(self) -> bool:
        return self.in1 or self.in2


class XandGate(Gate):
    kind = "XAND"

    def output(self) -> bool:
        return (self.in1 and self.in2) or (not self.in1 and not self.in2)


class XnandGate(Gate):
    kind = "XNAND"

    def output(self) -> bool:
        return not ((self.in1 and self.in2) or (not self.in1 and not self.in2))


class XnorGate(Gate):
    kind = "XNOR"

    def output(self) -> bool:
        return not ((self.in1 or self.in2) and (not self.in1 or not self.in2))


class XorGate(Gate):
    kind = "XOR"

    def output(self) -> bool:
        return (self.in1 or self.in2) and (not self.in1 or not self.in2)


_GATE_TYPES: dict[str, type[Gate]] = {
    cls.kind: cls
    for cls in (
        XnorGate,
        XandGate,
        XnandGate,
        XorGate,
        NandGate,
        NorGate,
        AndGate,
        OrGate,
        NotGate,
    )
}


def make_gate(kind: str) -> Gate:
    """Build a fresh gate of the named type, such as "AND" or "XNOR"."""
    try:
        cls = _GATE_TYPES[kind]
    except KeyError:
        raise ValueError(f"unknown gate type: {kind!r}") from None
    return cls()