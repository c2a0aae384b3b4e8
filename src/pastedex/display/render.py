"""Render the paste table as HTML.

Every control is a plain link or GET form carrying the table state in the
query string (``format``, repeated ``species``, ``search``), so the page works
without scripts when served by ``display.server``.
"""
import html
from dataclasses import dataclass
from typing import List

from .session import ALL_FORMATS, FORMAT_PARAM, SPECIES_PARAM, FilterSession

SEARCH_PARAM = "search"

EV_PRESENT = '<span class="text-success">&#10003;</span>'
EV_MISSING = '<span class="text-error">&#10007;</span>'


@dataclass
class Sprite:
    """One member image in a table row."""
    species: str
    slug: str
    url: str
    href: str  # query string a click on the sprite leads to
    active: bool = False


@dataclass
class TableRow:
    """Display values for one posting."""
    author: str
    description: str
    sprites: List[Sprite]
    has_evs: bool
    url: str


def build_rows(session: FilterSession) -> List[TableRow]:
    """Build a row for every posting visible in the session."""
    rows = []
    for posting in session.visible():
        sprites = [
            Sprite(
                species=m.species,
                slug=m.slug,
                url=session.config.sprite_url(m.slug),
                href=session.query_toggling(m.slug),
                active=session.is_highlighted(m.slug),
            )
            for m in posting.members
        ]
        rows.append(TableRow(
            author=posting.author,
            description=posting.description,
            sprites=sprites,
            has_evs=posting.has_evs,
            url=posting.source_url,
        ))
    return rows


def render_sprite(sprite: Sprite) -> str:
    classes = "pokemon-icon filter-active" if sprite.active else "pokemon-icon"
    name = html.escape(sprite.species)
    return (
        f'<a href="{html.escape(sprite.href)}">'
        f'<img src="{html.escape(sprite.url)}" alt="{name}" title="{name}" '
        f'class="{classes}" data-species="{html.escape(sprite.slug)}"></a>'
    )


def render_row(row: TableRow) -> str:
    team = "".join(render_sprite(s) for s in row.sprites)
    link = (
        f'<a class="info-button btn-outline btn-ghost btn-xs btn" href="{html.escape(row.url)}" '
        f'target="_blank" rel="noopener">&#9432;</a>'
    )
    return (
        "<tr>"
        f'<td class="author-col">{html.escape(row.author)}</td>'
        f'<td class="desc-col">{html.escape(row.description)}</td>'
        f'<td class="team-cell">{team}</td>'
        f'<td class="ev-cell">{EV_PRESENT if row.has_evs else EV_MISSING}</td>'
        f'<td class="paste-col">{link}</td>'
        "</tr>"
    )


def render_format_links(session: FilterSession) -> str:
    """One link per format choice; the selected one is marked active."""
    choices = [(ALL_FORMATS, "All formats")]
    choices += [(key, fmt.label) for key, fmt in session.config.formats.items()]

    links = []
    for key, label in choices:
        active = ' class="active"' if key == session.selected_format else ""
        href = session.query_string(format_key=key)
        links.append(f'<a href="{html.escape(href)}"{active}>{html.escape(label)}</a>')
    return '<nav id="formatFilter">' + "".join(links) + "</nav>"


def render_filter_tags(session: FilterSession) -> str:
    tags = [
        f'<div class="pokemon-tag" data-species="{html.escape(slug)}">'
        f'<img src="{html.escape(session.config.sprite_url(slug))}">'
        f'<a class="remove-tag" href="{html.escape(session.query_without(slug))}">&#10005;</a></div>'
        for slug in session.active_filters
    ]
    return '<div id="selectedPokemonContainer">' + "".join(tags) + "</div>"


def render_search_form(session: FilterSession, search: str = "") -> str:
    """GET form for the species search, keeping format and filters."""
    hidden = [(FORMAT_PARAM, session.selected_format)]
    hidden += [(SPECIES_PARAM, slug) for slug in session.active_filters]
    fields = "".join(
        f'<input type="hidden" name="{name}" value="{html.escape(value)}">'
        for name, value in hidden
    )
    disabled = " disabled" if session.is_full() else ""
    return (
        f'<form id="teamFilter" method="get">{fields}'
        f'<input id="teamFilterInput" name="{SEARCH_PARAM}" value="{html.escape(search)}" '
        f'placeholder="Filter by Pokemon"{disabled}></form>'
    )


def render_autocomplete(session: FilterSession, text: str) -> str:
    """Dropdown entries for the species typed so far; each link adds that species."""
    items = []
    for key in session.autocomplete_keys(text):
        if session.is_full():
            break
        href = session.query_string(filters=session.active_filters + [key.slug])
        items.append(
            f'<li class="dropdown-item"><a href="{html.escape(href)}">'
            f'<img src="{html.escape(session.config.sprite_url(key.slug))}" class="pokemon-icon"> '
            f"{html.escape(key.display_name)}</a></li>"
        )
    return '<ul id="teamFilterDropdown">' + "".join(items) + "</ul>"


def render_table(session: FilterSession) -> str:
    body = "".join(render_row(row) for row in build_rows(session))
    return (
        '<table class="table"><thead><tr>'
        "<th>Author</th><th>Description</th><th>Team</th><th>EVs</th><th></th>"
        f'</tr></thead><tbody id="pokeTableBody">{body}</tbody></table>'
    )


def render_page(session: FilterSession, search: str = "", title: str = "Team Pastes") -> str:
    """Render the full page for a session and the species search text."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{html.escape(title)}</title></head><body>"
        f"<h1>{html.escape(title)}</h1>"
        f"{render_format_links(session)}"
        f"{render_filter_tags(session)}"
        f"{render_search_form(session, search)}"
        f"{render_autocomplete(session, search) if search else ''}"
        f"{render_table(session)}"
        "</body></html>\n"
    )
