"""Tests for table rendering."""
from pastedex.config import DisplayConfig
from pastedex.display.render import (
    build_rows,
    render_autocomplete,
    render_filter_tags,
    render_format_links,
    render_page,
    render_row,
)
from pastedex.display.session import FilterSession
from pastedex.pastes.models import Member, Posting

def test_build_rows(sample_postings):
    session = FilterSession(sample_postings, config=DisplayConfig(sprite_base_url="https://img.test/sprites/"))
    session.add("pikachu")

    rows = build_rows(session)

    assert [r.author for r in rows] == ["Ash", "Misty"]
    first = rows[0].sprites[0]
    assert first.url == "https://img.test/sprites/pikachu.png"
    assert first.active
    assert first.href == "?format=all"
    assert not rows[0].sprites[1].active
    assert rows[0].sprites[1].href == "?format=all&species=pikachu&species=charizard"

def test_row_uses_slug_for_sprite(sample_postings):
    session = FilterSession(sample_postings, config=DisplayConfig(sprite_base_url="https://img.test"))
    session.select_format("regf")

    html = render_row(build_rows(session)[1])

    assert 'src="https://img.test/porygonz.png"' in html
    assert 'data-species="kommoo"' in html
    assert 'title="Kommo-o"' in html
    assert 'href="?format=regf&amp;species=kommoo"' in html
    assert 'href="https://pokepast.es/ccc"' in html
    assert "&#10007;" in html

def test_row_escapes_text():
    posting = Posting(author="<b>Ash</b>", description="A & B", members=(Member(species="Pikachu"),))
    html = render_row(build_rows(FilterSession([posting]))[0])

    assert "&lt;b&gt;Ash&lt;/b&gt;" in html
    assert "A &amp; B" in html

def test_format_links_keep_filters(sample_postings):
    session = FilterSession(sample_postings, selected_format="regh")
    session.add("blastoise")

    html = render_format_links(session)

    assert '<a href="?format=all&amp;species=blastoise">All formats</a>' in html
    assert 'href="?format=regh&amp;species=blastoise" class="active"' in html
    assert 'href="?format=regf&amp;species=blastoise">' in html

def test_filter_tag_removes_its_species(sample_postings):
    session = FilterSession(sample_postings, selected_format="regf")
    session.add("pikachu")
    session.add("charizard")

    html = render_filter_tags(session)

    assert 'class="remove-tag" href="?format=regf&amp;species=charizard"' in html
    assert 'class="remove-tag" href="?format=regf&amp;species=pikachu"' in html

def test_render_page(sample_postings):
    session = FilterSession(sample_postings, selected_format="regh")
    session.add("blastoise")

    page = render_page(session)

    assert 'id="formatFilter"' in page
    assert 'class="pokemon-tag" data-species="blastoise"' in page
    assert '<form id="teamFilter" method="get">' in page
    assert '<input type="hidden" name="species" value="blastoise">' in page
    assert "teamFilterDropdown" not in page
    assert page.count("<tr>") == 2  # header + Misty

def test_render_page_with_search(sample_postings):
    page = render_page(FilterSession(sample_postings), search="kom")

    assert 'value="kom"' in page
    assert '<ul id="teamFilterDropdown">' in page
    assert "kommoo.png" in page

def test_render_autocomplete(sample_postings):
    session = FilterSession(sample_postings)
    session.add("pikachu")

    html = render_autocomplete(session, "o")

    assert 'href="?format=all&amp;species=pikachu&amp;species=blastoise"' in html
    assert "Kommo-o" in html
    assert "Porygon-Z" in html

def test_render_autocomplete_full_session(sample_postings):
    session = FilterSession(sample_postings)
    for i in range(6):
        session.add(f"species{i}")

    assert render_autocomplete(session, "o") == '<ul id="teamFilterDropdown"></ul>'
