"""Shared fixtures: a small synthetic MagentaA11y content tree."""

from pathlib import Path

import pytest
import pytest_asyncio

from magentaa11y_mcp.engine import ContentLoader
from magentaa11y_mcp.engine.handlers import HandlerContext

BUTTON_MD = """---
label: Button
gherkin: G
condensed: C
---
# Button

## Overview
Buttons trigger actions. Keyboard access is covered by 2.1.1 and 4.1.2.

## Usage
Use a native button element so the focus indicator is always visible.
```html
<button type="button">Save</button>
```
"""

CHECKBOX_MD = """---
developerNotes: |
  Use a native input with type checkbox.
---
# Checkbox

## Name
Checkboxes need a visible label (1.3.1, 10.1.1 is not real but sorts first).

## State
Announce checked and unchecked states.
"""

TEXT_INPUT_MD = """# Text Input

## Label
Every text input needs a programmatic label (1.3.1).
"""

SWITCH_MD = """---
label: Switch
iosDeveloperNotes: Use UISwitch.
androidDeveloperNotes: Use SwitchCompat or MaterialSwitch.
---
# Switch

## iOS
Set accessibilityLabel and add UIAccessibilityTraitButton.
Avoid accessibilityHint duplication; accessibilityLabel is required.

## Android
Use MaterialSwitch with a contentDescription.
Use stateDescription for on/off. A plain Switch also works.
Meets 4.1.2.
"""

PICKER_MD = """# Picker

A picker lets users choose one value from a list.
"""


def write_doc(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    root = tmp_path / "documentation"
    write_doc(root, "web/controls/button.md", BUTTON_MD)
    write_doc(root, "web/controls/checkbox.md", CHECKBOX_MD)
    write_doc(root, "web/forms/text-input.md", TEXT_INPUT_MD)
    write_doc(root, "web/forms/notes.txt", "not a component")
    write_doc(root, "native/controls/switch.md", SWITCH_MD)
    write_doc(root, "native/components/picker.md", PICKER_MD)
    return root


@pytest_asyncio.fixture
async def loader(content_root: Path) -> ContentLoader:
    content_loader = ContentLoader(content_root)
    await content_loader.initialize()
    return content_loader


@pytest.fixture
def handler_context(loader: ContentLoader) -> HandlerContext:
    return HandlerContext(loader=loader)
