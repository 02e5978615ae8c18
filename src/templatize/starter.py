"""Bundled starter templates that can be written without a source component."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

__all__ = ["DEFAULT_STARTER", "StarterScaffolder", "available_starters"]


COMPONENT_TEMPLATE = """import styles from './{{kebabCase name}}.module.css';

export interface {{pascalCase name}}Props {
  className?: string;
}

export const {{pascalCase name}} = ({ className }: {{pascalCase name}}Props) => {
  return <div className={`${styles.{{camelCase name}}} ${className ?? ''}`} data-testid="{{kebabCase name}}" />;
};

export default {{pascalCase name}};
"""

COMPONENT_TEST_TEMPLATE = """import { render, screen } from '@testing-library/react';
import { {{pascalCase name}} } from './{{pascalCase name}}';

test('renders {{pascalCase name}}', () => {
  render(<{{pascalCase name}} />);
  expect(screen.getByTestId('{{kebabCase name}}')).toBeTruthy();
});
"""

COMPONENT_STYLES_TEMPLATE = """.{{camelCase name}} {
  display: block;
}
"""

INDEX_TEMPLATE = """export { {{pascalCase name}}, default } from './{{pascalCase name}}';
export type { {{pascalCase name}}Props } from './{{pascalCase name}}';
"""

HOOK_TEMPLATE = """import { useState } from 'react';

export function use{{pascalCase name}}<T>(initial: T) {
  const [{{camelCase name}}, set{{pascalCase name}}] = useState<T>(initial);
  return { {{camelCase name}}, set{{pascalCase name}} } as const;
}
"""

HOOK_TEST_TEMPLATE = """import { renderHook } from '@testing-library/react';
import { use{{pascalCase name}} } from './use{{pascalCase name}}';

test('use{{pascalCase name}} exposes its initial value', () => {
  const { result } = renderHook(() => use{{pascalCase name}}(1));
  expect(result.current.{{camelCase name}}).toBe(1);
});
"""


STARTERS: Mapping[str, tuple[tuple[str, str], ...]] = MappingProxyType(
    {
        "component": (
            ("{{pascalCase name}}.tsx.hbs", COMPONENT_TEMPLATE),
            ("{{pascalCase name}}.test.tsx.hbs", COMPONENT_TEST_TEMPLATE),
            ("{{kebabCase name}}.module.css.hbs", COMPONENT_STYLES_TEMPLATE),
            ("index.ts.hbs", INDEX_TEMPLATE),
        ),
        "hook": (
            ("use{{pascalCase name}}.ts.hbs", HOOK_TEMPLATE),
            ("use{{pascalCase name}}.test.ts.hbs", HOOK_TEST_TEMPLATE),
        ),
    }
)

DEFAULT_STARTER = "component"


def available_starters() -> tuple[str, ...]:
    """Return the keys of the bundled starter templates."""

    return tuple(STARTERS)


@dataclass(slots=True)
class StarterScaffolder:
    """Write a bundled starter template tree to disk."""

    key: str = DEFAULT_STARTER

    def __post_init__(self) -> None:
        if self.key not in STARTERS:
            choices = ", ".join(available_starters())
            raise ValueError(f"unknown starter template '{self.key}'. Choose one of: {choices}.")

    def create(self, target_dir: str | Path, *, force: bool = False) -> Path:
        """Copy the starter identified by :attr:`key` into ``target_dir``."""

        target_path = Path(target_dir).expanduser().resolve()
        target_path.mkdir(parents=True, exist_ok=True)

        for relative_path, template in STARTERS[self.key]:
            destination = target_path / relative_path
            if destination.exists() and not force:
                raise FileExistsError(f"{destination} already exists")
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(template, encoding="utf-8")

        return target_path
