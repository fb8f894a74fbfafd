"""Result type for board-integrity checks."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a grid against the ``0..N²-1`` bijection.

    ``duplicates`` maps each label seen more than once to its count,
    ``missing`` lists expected labels that never appear, and
    ``unexpected`` lists labels outside ``0..N²-1``.
    """

    duplicates: dict[int, int] = field(default_factory=dict)
    missing: list[int] = field(default_factory=list)
    unexpected: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not (self.duplicates or self.missing or self.unexpected)

    def describe(self) -> str:
        """Return a one-line diagnostic, or ``"OK"`` for a valid board."""
        if self.ok:
            return "OK"
        dups = ", ".join(f"{label} (x{n})" for label, n in self.duplicates.items())
        missing = ", ".join(str(label) for label in self.missing)
        text = f"Board error: duplicates={dups}, missing={missing}"
        if self.unexpected:
            text += ", unexpected=" + ", ".join(str(v) for v in self.unexpected)
        return text
