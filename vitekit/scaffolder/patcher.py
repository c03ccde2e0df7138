"""Find/replace patching of files produced by the external generator.

create-vite's output changes between releases, so every patch is a list of
regex rules and the result says exactly which rules matched.  A file is only
rewritten when every required rule matched; otherwise it is left untouched
and the caller decides how to report the miss.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class PatchRule:
    """Replace the first match of *pattern* (multiline regex) with *replacement*."""

    description: str
    pattern: str
    replacement: str
    required: bool = True

    def apply(self, text: str) -> tuple[str, bool]:
        new_text, count = re.subn(
            self.pattern, self.replacement, text, count=1, flags=re.MULTILINE
        )
        return new_text, count > 0


@dataclass
class PatchResult:
    """Which rules matched a file, and whether it was rewritten."""

    path: Path
    applied: list[str] = field(default_factory=list)
    unmatched: list[str] = field(default_factory=list)
    written: bool = False
    missing: bool = False

    @property
    def complete(self) -> bool:
        return self.written and not self.unmatched


def patch_text(text: str, rules: list[PatchRule]) -> tuple[str, list[str], list[str]]:
    """Apply *rules* in order to *text*.

    Returns:
        ``(new_text, applied, unmatched)`` where *applied* and *unmatched* hold
        rule descriptions.  Optional rules that miss are in neither list.
    """
    applied: list[str] = []
    unmatched: list[str] = []
    for rule in rules:
        text, matched = rule.apply(text)
        if matched:
            applied.append(rule.description)
        elif rule.required:
            unmatched.append(rule.description)
    return text, applied, unmatched


def patch_file(path: Path, rules: list[PatchRule]) -> PatchResult:
    """Patch *path* in place when all required *rules* match."""
    return patch_files({path: rules})[0]


def patch_files(targets: dict[Path, list[PatchRule]]) -> list[PatchResult]:
    """Patch several files as a unit.

    Nothing is written unless every required rule matched in every file, so
    a scaffold is never left half-patched.
    """
    results: list[PatchResult] = []
    pending: list[tuple[PatchResult, str, str]] = []
    for path, rules in targets.items():
        if not path.exists():
            results.append(
                PatchResult(
                    path=path,
                    unmatched=[r.description for r in rules if r.required],
                    missing=True,
                )
            )
            continue
        original = path.read_text(encoding="utf-8")
        new_text, applied, unmatched = patch_text(original, rules)
        result = PatchResult(path=path, applied=applied, unmatched=unmatched)
        results.append(result)
        pending.append((result, original, new_text))

    if any(r.unmatched for r in results):
        return results

    for result, original, new_text in pending:
        if new_text != original:
            result.path.write_text(new_text, encoding="utf-8")
        result.written = True
    return results
