"""Shared fixtures: small monorepos built on disk."""

import pytest

from tests.builders import add_package
from tests.builders import write_json


@pytest.fixture
def monorepo(tmp_path):
    """Lerna monorepo with "foo" and "bar", where bar depends on foo.

    foo: src/index.ts, src/lib.ts, src/data.json
    bar: src/bin.ts, src/index.ts, src/legacy.js (allowJs)
    """
    root = tmp_path / "monorepo"
    write_json(root / "lerna.json", {"packages": ["packages/*"], "version": "0.0.0"})
    write_json(root / "package.json", {"name": "root", "private": True})

    add_package(
        root,
        "packages/foo",
        "foo",
        files={
            "src/index.ts": 'export * from "./lib";\n',
            "src/lib.ts": "export const answer = 42;\n",
            "src/data.json": '{"answer": 42}\n',
        },
    )
    add_package(
        root,
        "packages/bar",
        "bar",
        tsconfig={"compilerOptions": {"allowJs": True}, "include": ["src/**/*"]},
        dependencies={"foo": "1.0.0", "lodash": "^4.17.21"},
        files={
            "src/bin.ts": 'import { answer } from "foo";\nconsole.log(answer);\n',
            "src/index.ts": 'export * from "foo";\n',
            "src/legacy.js": "module.exports = {};\n",
        },
    )
    return root
