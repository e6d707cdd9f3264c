"""Static catalog of files written into every new project."""

from __future__ import annotations

from pathlib import Path

from devkick.templates.base import ArtifactTemplate

NAME = "{{name}}"
VERSION = "{{runtime_version}}"
AUTHOR = "{{author}}"
YEAR = "{{year}}"
BRANCH = "{{ci_branch}}"

GITIGNORE = """\
.venv/
__pycache__/
*.pyc
.pytest_cache/
.coverage
dist/
build/
*.egg-info/
"""

# Poetry refuses to add dependencies while the README it declares is missing,
# so a short stub goes in before the package manager runs.
README_STUB = """\
# ⚡ {{name}}

![CI](../../actions/workflows/python-app.yml/badge.svg)

See full setup instructions in this file.
"""

LICENSE = """\
MIT License

Copyright (c) {{year}} {{author}}

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

ENVRC = "use poetry\n"

MAKEFILE = (
    ".PHONY: setup run test lint coverage\n"
    "\n"
    "setup:\n"
    "\tpoetry install\n"
    "\n"
    "run:\n"
    "\tpoetry run python app/main.py\n"
    "\n"
    "test:\n"
    "\tpoetry run pytest\n"
    "\n"
    "lint:\n"
    "\tpoetry run black .\n"
    "\n"
    "coverage:\n"
    "\tpoetry run coverage run -m pytest && poetry run coverage report -m\n"
)

MAIN_PY = '''\
def main():
    print("Hello from {{name}}!")


if __name__ == "__main__":
    main()
'''

TEST_DUMMY_PY = """\
def test_dummy():
    assert True
"""

WORKFLOW = """\
name: Python application

on:
  push:
    branches: [ {{ci_branch}} ]
  pull_request:
    branches: [ {{ci_branch}} ]

jobs:
  build:
    runs-on: ubuntu-latest

    steps:
    - uses: actions/checkout@v4
    - name: Set up Python
      uses: actions/setup-python@v5
      with:
        python-version: "{{runtime_version}}"
    - name: Install Poetry
      run: |
        curl -sSL https://install.python-poetry.org | python3 -
        echo "$HOME/.local/bin" >> $GITHUB_PATH
    - name: Install dependencies
      run: poetry install
    - name: Run tests
      run: poetry run pytest
    - name: Coverage report
      run: |
        poetry run coverage run -m pytest
        poetry run coverage report
"""

README_FULL = """\
# ⚡ {{name}}

![CI](../../actions/workflows/python-app.yml/badge.svg)

A Python {{runtime_version}} project managed with `pyenv`, `poetry` and `direnv`.

---

### 🛠 Requirements

- [pyenv](https://github.com/pyenv/pyenv) – Python version management
- [poetry](https://python-poetry.org/docs/#installation) – Dependency management and virtualenvs
- [direnv](https://direnv.net/) – Auto-activation of environments

---

### ⚙️ Quick Start

```bash
cd {{name}}
make setup
make run
```

Other targets: `make test`, `make lint`, `make coverage`.

---

### 📂 Layout

- `app/` → Main Python source code
- `tests/` → Pytest test suite
- `.python-version` → Python {{runtime_version}}, pinned with pyenv
- `.envrc` → Automatic env loading via direnv
- `pyproject.toml` → Managed with poetry
- `requirements.txt` → Exported dependencies for other tooling
- `Makefile` → Development workflow
- `.github/workflows/` → CI pipeline with GitHub Actions
"""

CATALOG: tuple[ArtifactTemplate, ...] = (
    ArtifactTemplate(Path(".gitignore"), GITIGNORE),
    ArtifactTemplate(Path("README.md"), README_STUB, {NAME: "name"}),
    ArtifactTemplate(Path("LICENSE"), LICENSE, {YEAR: "year", AUTHOR: "author"}),
    ArtifactTemplate(Path(".envrc"), ENVRC),
    ArtifactTemplate(Path("Makefile"), MAKEFILE),
    ArtifactTemplate(Path("app") / "main.py", MAIN_PY, {NAME: "name"}),
    ArtifactTemplate(Path("tests") / "test_dummy.py", TEST_DUMMY_PY),
    ArtifactTemplate(
        Path(".github") / "workflows" / "python-app.yml",
        WORKFLOW,
        {VERSION: "runtime_version", BRANCH: "ci_branch"},
    ),
    ArtifactTemplate(
        Path("README.md"),
        README_FULL,
        {NAME: "name", VERSION: "runtime_version"},
        supersedes=True,
    ),
)
