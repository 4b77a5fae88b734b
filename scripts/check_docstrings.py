"""Check that code blocks in docstrings are closed and end with a blank line.

A python block whose closing fence directly follows an output line makes doctest read the fence as expected output.
"""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

import pyoresult as pr

SRC_DIR = Path().joinpath("src", "pyoresult")
FENCE = "```"
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)")


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    name: str
    line_no: int
    message: str


class _Block(NamedTuple):
    language: str
    line_no: int


def _is_documentable(
    node: ast.AST,
) -> TypeIs[ast.FunctionDef | ast.AsyncFunctionDef | ast.ClassDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef))


def _check_docstring(
    file_path: Path, name: str, docstring: str, start_line: int
) -> list[DocstringError]:
    errors: list[DocstringError] = []
    opened: pr.Option[_Block] = pr.NONE
    previous = ""
    for offset, raw_line in enumerate(docstring.split("\n")):
        line = raw_line.strip()
        line_no = start_line + offset
        match = CODE_BLOCK_PATTERN.match(line)
        if match is None:
            previous = line
            continue
        if line != FENCE or pr.option.is_none(opened):
            if pr.option.is_some(opened):
                errors.append(
                    DocstringError(file_path, name, line_no, "Nested code block")
                )
            opened = _Block(match.group(1) or "plaintext", line_no)
        else:
            block = pr.option.unwrap(opened)
            if block.language == "python" and previous.strip() != "":
                errors.append(
                    DocstringError(
                        file_path,
                        name,
                        line_no,
                        "Missing blank line before closing ``` of a python block",
                    )
                )
            opened = pr.NONE
        previous = line
    if pr.option.is_some(opened):
        block = pr.option.unwrap(opened)
        errors.append(
            DocstringError(
                file_path, name, block.line_no, f"Unclosed ```{block.language} block"
            )
        )
    return errors


def _check_file(file_path: Path) -> pr.Result[list[DocstringError], SyntaxError]:
    parsed = pr.result.perform(
        lambda: ast.parse(
            file_path.read_text(encoding="utf-8"), filename=str(file_path)
        ),
        exceptions=(SyntaxError,),
    )

    def _walk(tree: ast.Module) -> list[DocstringError]:
        errors: list[DocstringError] = []
        nodes: list[tuple[str, int, ast.AST]] = [("<module>", 1, tree)]
        nodes.extend(
            (node.name, node.lineno, node)
            for node in ast.walk(tree)
            if _is_documentable(node)
        )
        for name, line_no, node in nodes:
            docstring = pr.option.from_(ast.get_docstring(node, clean=False))
            if pr.option.is_some(docstring):
                errors.extend(_check_docstring(file_path, name, docstring, line_no))
        return errors

    return parsed.map(_walk)  # type: ignore[return-value]


def main() -> None:
    """Check all docstrings of the package."""
    rich.print(
        rich.text.Text("Checking docstrings for code block issues...", style="cyan bold")
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")

    found, unparsable = pr.result.partition(_check_file(path) for path in files)
    for exc in unparsable:
        rich.print(rich.text.Text(f"[SKIPPED] {exc.filename}: {exc.msg}", style="yellow"))

    all_errors = [error for errors in found for error in errors]
    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Object", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path.relative_to(Path())}:{error.line_no}",
            error.name,
            error.message,
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )
    raise SystemExit(1)


if __name__ == "__main__":
    main()
