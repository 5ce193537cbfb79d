"""Check that all code blocks in docstrings are properly closed."""

import ast
import re
from pathlib import Path
from typing import Annotated, NamedTuple, TypeIs

import rich
import rich.table
import rich.text
import typer

import maybechain as mc

SRC_DIR = Path().joinpath("src", "maybechain")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "override", "no_doctest", "wraps"})

app = typer.Typer(help="Docstring checks for maybechain developments.")

type FuncDef = ast.FunctionDef | ast.AsyncFunctionDef


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    error_line_no: int
    errors: tuple[str, ...]


def _is_documentable(node: ast.AST) -> TypeIs[FuncDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _is_public(node: FuncDef) -> bool:
    return not node.name.startswith("_") and not node.name.istitle()


def _has_skip_decorator(node: FuncDef) -> bool:
    """Check if function has a decorator that should skip docstring check."""
    return any(
        (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        for d in node.decorator_list
    )


def check_code_blocks(
    docstring: str, start_line: int, func_name: str, *, skip_doctest: bool = False
) -> list[ErrorDetail]:
    """Check that all code blocks in a docstring are properly closed.

    Public functions documenting their arguments must also show a ```python example,
    unless `skip_doctest` is set or the docstring contains the @no_doctest flag.
    """
    errors: list[ErrorDetail] = []
    stack: list[tuple[int, str]] = []
    lines = docstring.split("\n")
    for line_num, line in enumerate(lines):
        match = CODE_BLOCK_PATTERN.search(line.strip())
        if not match:
            continue
        if line.strip() == "```":
            if stack:
                stack.pop()
            else:
                errors.append(
                    ErrorDetail(
                        line_no=start_line + line_num,
                        message="Closing block ``` without matching opening",
                    )
                )
            continue
        stack.append((line_num + 1, match.group(1) or "plaintext"))

    errors.extend(
        ErrorDetail(line_no=start_line + idx - 1, message=f"Unclosed ```{lang} block")
        for idx, lang in stack
    )

    needs_example = (
        not skip_doctest
        and "@no_doctest" not in docstring
        and not func_name.startswith("_")
        and not func_name.istitle()
        and any(line.strip() == "Args:" for line in lines)
    )
    has_example = mc.first_or_none(
        lines, lambda line: bool(CODE_BLOCK_PATTERN.search(line.strip())) and "python" in line
    ).is_some()
    if needs_example and not has_example:
        errors.append(
            ErrorDetail(
                line_no=start_line,
                message="Missing doctest: No ```python block found in docstring",
            )
        )
    return errors


def _process_node(file_path: Path, node: FuncDef) -> mc.Maybe[DocstringError]:
    def _missing() -> mc.Maybe[DocstringError]:
        if not _is_public(node):
            return mc.NONE
        return mc.Some(
            DocstringError(
                file_path=file_path,
                func_name=node.name,
                line_no=node.lineno,
                error_line_no=node.lineno,
                errors=("Missing docstring",),
            )
        )

    def _checked(docstring: str) -> mc.Maybe[DocstringError]:
        errors = check_code_blocks(docstring, node.lineno, node.name)
        return mc.first_or_none(errors).map(
            lambda first: DocstringError(
                file_path=file_path,
                func_name=node.name,
                line_no=node.lineno,
                error_line_no=first.line_no,
                errors=tuple(e.message for e in errors),
            )
        )

    return mc.Maybe.from_(ast.get_docstring(node)).match(_checked, _missing)


def check_file(file_path: Path) -> list[DocstringError]:
    """Collect the docstring errors of every function in a file."""
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []
    return [
        error.unwrap()
        for error in (
            _process_node(file_path, node)
            for node in ast.walk(tree)
            if _is_documentable(node) and not _has_skip_decorator(node)
        )
        if error.is_some()
    ]


def _render(all_errors: list[DocstringError]) -> None:
    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path}:{error.error_line_no}",
            error.func_name,
            "\n".join(error.errors),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )


@app.command()
def main(
    src: Annotated[
        Path, typer.Option("--src", help="Directory holding the sources to check.")
    ] = SRC_DIR,
) -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(src.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")

    all_errors = [error for file in files for error in check_file(file)]
    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return
    _render(all_errors)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
