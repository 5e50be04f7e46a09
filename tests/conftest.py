"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path


HOLA_ARTICLE = (
    '<article id="hola01">'
    '<header class="f" title="Definici&#xF3;n de hola">hola<sup>1</sup></header>'
    '<p class="n2">Voz expresiva.</p>'
    '<p class="j" id="hl1"><span class="n_acep">1. </span>'
    '<abbr class="d" title="interjecci&#xF3;n">interj.</abbr> <mark>¡hola!</mark></p>'
    '</article>'
)

SALUDO_ARTICLE = """<article id="Wsbx4Qf">
<header class="f" title="Definici&#xF3;n de saludo">saludo</header>
<p class="n2">De <i>saludar</i>, con influencia del lat. <i>salus</i>.</p>
<p class="j" id="sl1"><span class="n_acep">1. </span><abbr class="d" title="nombre masculino">m.</abbr> Acci&#xF3;n y efecto de saludar.<div class="sin-header sin-inline"><table class='sinonimos'><tr><td><abbr title="Sin&#xF3;nimos">Sin.:</abbr></td><td><ul class="sinonimos"><li><mark data-id="a">salutación</mark>, <mark data-id="b">saludo</mark>, <mark data-id="c">salutación</mark></li></td></tr></table></div></p>
<p class="j" id="sl2"><span class="n_acep">2. </span><abbr class="d" title="nombre masculino">m.</abbr> Palabra o gesto de despedida amable.<div class="ant-header ant-inline"><table><tr><td>Ant.:</td><td><ul><li><mark>desaire</mark></li><li><mark> desaire </mark></li><li><mark>ofensa</mark></li></ul></td></tr></table></div></p>
<p class="j" id="sl3"><span class="n_acep">3. </span><abbr class="d" title="nombre masculino">m.</abbr></p>
<p class="j" id="sl4"><span class="n_acep">4. </span><abbr class="d" title="nombre masculino">m.</abbr> U. t. en pl.</p>
</article>"""

COMER_TABLE = """<table class="cnj">
<tr><th colspan="5">Formas no personales</th></tr>
<tr><th colspan="3">Infinitivo</th><th colspan="2">Gerundio</th></tr>
<tr><td colspan="3">comer</td><td colspan="2">comiendo</td></tr>
<tr><th colspan="5">Participio</th></tr>
<tr><td colspan="5">comido</td></tr>
<tr><th colspan="5">Indicativo</th></tr>
<tr><th>N&#xFA;mero</th><th>Personas del discurso</th><th>Pronombres personales</th><th>Presente</th><th>Pret&#xE9;rito imperfecto / Copret&#xE9;rito</th></tr>
<tr><th rowspan="3">Singular</th><th>Primera</th><th>yo</th><td>como</td><td>com&#xED;a</td></tr>
<tr><th>Segunda</th><th>t&#xFA; / vos</th><td>comes / com&#xE9;s</td><td>com&#xED;as</td></tr>
<tr><th rowspan="3">Plural</th><th>Primera</th><th>nosotros</th><td>comemos</td><td>com&#xED;amos</td></tr>
<tr><th colspan="5">Subjuntivo</th></tr>
<tr><th>N&#xFA;mero</th><th>Personas del discurso</th><th>Pronombres personales</th><th>Presente</th></tr>
<tr><th>Singular</th><th>Primera</th><th>yo</th><td>coma</td></tr>
<tr><th colspan="5">Imperativo</th></tr>
<tr><th>N&#xFA;mero</th><th>Personas del discurso</th><th>Pronombres personales</th><th></th></tr>
<tr><th>Singular</th><th>Segunda</th><th>t&#xFA; / vos</th><td>come / com&#xE9;</td></tr>
</table>"""

COMER_ARTICLE = (
    '<article id="9xPqL2m">'
    '<header class="f" title="Definici&#xF3;n de comer">comer</header>'
    '<p class="n2">Del lat. <i>comedere</i>.</p>'
    '<p class="j" id="cm1"><span class="n_acep">1. </span>'
    '<abbr class="d" title="verbo intransitivo">intr.</abbr> Masticar y deglutir un alimento.</p>'
    '<div id="conjugacion">' + COMER_TABLE + '</div>'
    '</article>'
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def hola_article():
    """Minimal article: one interjection sense, homograph index in header."""
    return HOLA_ARTICLE


@pytest.fixture
def saludo_article():
    """Article with synonyms, antonyms, an empty sense and abbreviations."""
    return SALUDO_ARTICLE


@pytest.fixture
def comer_article():
    """Verb article with a full conjugation table."""
    return COMER_ARTICLE


@pytest.fixture
def comer_table():
    """Conjugation table markup alone."""
    return COMER_TABLE
