"""Pytest configuration and shared fixtures."""

import pytest

from pastedex.pastes.models import Member, Posting


SAMPLE_PASTE_HTML = """
<html>
<body>
<article>
<div class="img"><img class="img-pokemon" src="/img/pokemon/902-1.png"></div>
<pre><span class="type-water">Basculegion</span> (<span class="gender-f">F</span>) @ Choice Scarf
<span class="attr">Ability:</span> Adaptability
<span class="attr">Level:</span> 50
<span class="attr">Tera Type:</span> Ghost
<span class="attr">EVs: </span><span class="stat-hp">4 HP</span> / <span class="stat-atk">252 Atk</span> / <span class="stat-spe">252 Spe</span>
Jolly Nature
- <span class="type-water">Wave Crash</span>
- <span class="type-ghost">Last Respects</span>
</pre>
</article>
<article>
<div class="img"><img class="img-pokemon" src="/img/pokemon/987-0.png"></div>
<pre>Sparky (<span class="type-electric">Pikachu</span>) (<span class="gender-f">F</span>) @ Light Ball
<span class="attr">Ability:</span> Lightning Rod
- <span class="type-electric">Thunderbolt</span>
</pre>
</article>
<article>
<pre><span class="type-bug">Vivillon-Pokeball</span> @ Focus Sash
<span class="attr">Ability:</span> Compound Eyes
- <span class="type-bug">Hurricane</span>
</pre>
</article>
<aside>
<h1>Ash's Gen 9 VGC Team</h1>
<h2>by somebody else</h2>
<p>Format: gen9vgc2024regf</p>
<p>Some notes about the team.</p>
</aside>
</body>
</html>
"""


@pytest.fixture
def sample_paste_html():
    """Return a rendered paste page."""
    return SAMPLE_PASTE_HTML


@pytest.fixture
def sample_postings():
    """Return a small set of postings across two formats."""
    return [
        Posting(
            author="Ash",
            description="Rain",
            members=(Member(species="Pikachu"), Member(species="Charizard")),
            has_evs=True,
            format="gen9vgc2024regf",
            source_url="https://pokepast.es/aaa",
            format_key="regf",
        ),
        Posting(
            author="Misty",
            description="Sun",
            members=(Member(species="Pikachu"), Member(species="Blastoise"), Member(species="Indeedee-f")),
            format_key="regh",
            source_url="https://pokepast.es/bbb",
        ),
        Posting(
            author="Brock",
            description="Trick Room",
            members=(Member(species="Porygon-Z"), Member(species="Kommo-o")),
            format_key="regf",
            source_url="https://pokepast.es/ccc",
        ),
    ]
