"""CLI command: objtasks selector -- build and print a compound selector."""

from __future__ import annotations

import sys

import click

from objtasks.selector import Selector


@click.command()
@click.option("--element", default=None, help="Element (type) name")
@click.option("--id", "id_", default=None, help="Id, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute body (repeatable)")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)"
)
@click.option("--pseudo-element", default=None, help="Pseudo-element name")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound CSS selector from its parts and print it.

    Parts are appended in the order element, id, class, attribute,
    pseudo-class, pseudo-element, whatever order the options are given in.
    """
    sel = Selector()
    if element is not None:
        sel = sel.element(element)
    if id_ is not None:
        sel = sel.id(id_)
    for name in classes:
        sel = sel.class_(name)
    for spec in attrs:
        sel = sel.attr(spec)
    for name in pseudo_classes:
        sel = sel.pseudo_class(name)
    if pseudo_element is not None:
        sel = sel.pseudo_element(pseudo_element)

    if not sel.fragments:
        click.echo("Error: no selector parts given", err=True)
        sys.exit(1)
    click.echo(sel.stringify())
