"""Tests for sense paragraph extraction."""

from raelex.definitions import (
    clean_definition_text,
    expand_abbreviations,
    extract_antonyms,
    extract_definitions,
    extract_synonyms,
    extract_terms,
    parse_paragraph,
)


class TestExtractTerms:
    """Test highlighted term collection."""

    def test_order_and_deduplication(self):
        """Terms keep first-seen order and appear once."""
        block = "<li><mark>b</mark>, <mark>a</mark>, <mark>b</mark></li>"
        assert extract_terms(block) == ["b", "a"]

    def test_whitespace_trimmed(self):
        """Surrounding whitespace does not create a second term."""
        block = "<mark> alegre </mark><mark>alegre</mark>"
        assert extract_terms(block) == ["alegre"]

    def test_blank_terms_dropped(self):
        assert extract_terms("<mark>   </mark><mark>x</mark>") == ["x"]

    def test_marks_with_attributes(self):
        assert extract_terms('<mark data-id="abc">feliz</mark>') == ["feliz"]


class TestSynonymsAndAntonyms:
    """Test the inline synonym table and antonym container."""

    def test_synonyms_without_closing_list(self):
        """The missing </ul> defect is tolerated by stopping at </td>."""
        paragraph = (
            "Texto.<table class='sinonimos'><tr><td>Sin.:</td>"
            "<td><ul><li><mark>uno</mark>, <mark>dos</mark></li></td>"
            "<td><mark>fuera</mark></td></tr></table>"
        )
        assert extract_synonyms(paragraph) == ["uno", "dos"]

    def test_no_synonym_table(self):
        assert extract_synonyms("Texto sin tabla.") == []

    def test_antonyms(self):
        paragraph = (
            '<div class="ant-header ant-inline"><table><tr><td>'
            "<ul><li><mark>triste</mark></li><li><mark>triste</mark></li></ul>"
            "</td></tr></table></div>"
        )
        assert extract_antonyms(paragraph) == ["triste"]

    def test_antonym_list_must_be_closed(self):
        """Antonym lists follow the regular nesting; no </ul> means no match."""
        paragraph = '<div class="ant-header ant-inline"><ul><li><mark>x</mark></li></div>'
        assert extract_antonyms(paragraph) == []


class TestAbbreviations:
    """Test literal abbreviation expansion."""

    def test_expansions(self):
        assert expand_abbreviations("U. t. en pl.") == "U. también en plural"
        assert expand_abbreviations("En sing.") == "En singular"
        assert expand_abbreviations("p. us.") == "poco us."

    def test_substring_replacement(self):
        """Matches are not word-bounded; every occurrence is replaced."""
        assert expand_abbreviations("xsing.y sing.") == "xsingulary singular"

    def test_applies_inside_words(self):
        """'t.' inside a word ending a sentence is expanded too."""
        assert expand_abbreviations("Es un gat.") == "Es un gatambién"


class TestCleanDefinitionText:
    """Test markup removal from a paragraph body."""

    def test_strips_numbering_category_and_headword_echo(self):
        paragraph = (
            '<span class="n_acep">2. </span><abbr class="d" title="adjetivo">adj.</abbr> '
            '<span class="h">hola</span>Alegre y <i>jovial</i>.'
        )
        assert clean_definition_text(paragraph) == "Alegre y jovial."

    def test_strips_inline_containers(self):
        paragraph = (
            'Breve.<div class="sin-header sin-inline"><mark>corto</mark></div>'
            '<div class="ant-header ant-inline"><mark>largo</mark></div>'
        )
        assert clean_definition_text(paragraph) == "Breve."

    def test_entities_decoded(self):
        assert clean_definition_text("Canci&#xF3;n corta.") == "Canción corta."


class TestParseParagraph:
    """Test per-paragraph Definition assembly."""

    def test_category_from_first_titled_abbr(self):
        paragraph = '<abbr class="d" title="interjecci&#xF3;n">interj.</abbr> Saludo.'
        definition = parse_paragraph(paragraph)
        assert definition.category == "interjección"
        assert definition.text == "Saludo."

    def test_missing_parts_degrade_to_empty(self):
        definition = parse_paragraph("Solo texto.")
        assert definition.category == ""
        assert definition.synonyms == ()
        assert definition.antonyms == ()


class TestExtractDefinitions:
    """Test whole-article definition extraction."""

    def test_saludo(self, saludo_article):
        """Empty paragraphs are dropped; the rest keep source order."""
        definitions = extract_definitions(saludo_article)

        assert [d.text for d in definitions] == [
            "Acción y efecto de saludar.",
            "Palabra o gesto de despedida amable.",
            "U. también en plural",
        ]
        assert all(d.category == "nombre masculino" for d in definitions)

        assert definitions[0].synonyms == ("salutación", "saludo")
        assert definitions[0].antonyms == ()
        assert definitions[1].synonyms == ()
        assert definitions[1].antonyms == ("desaire", "ofensa")

    def test_count_matches_paragraphs(self):
        """N non-empty paragraphs give N definitions."""
        html = "".join(
            f'<p class="j" id="a{i}">Sentido n&#xFA;mero {i}</p>' for i in range(5)
        )
        definitions = extract_definitions(html)
        assert len(definitions) == 5
        assert definitions[3].text == "Sentido número 3"

    def test_multiline_paragraph(self):
        html = '<p class="j">\n  Primera\n  línea\n</p>'
        assert extract_definitions(html)[0].text == "Primera\n  línea"

    def test_no_paragraphs(self):
        assert extract_definitions("<article id=\"x\"></article>") == []
