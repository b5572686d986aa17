from pathlib import Path

FEATURE_DIR = str(Path(__file__).parent / "FEATURE")

GERMAN_STEPS = [
    {"keyword": "Given", "title": "die Spezifikation ist in Deutsch geschrieben"},
    {"keyword": "When", "title": "die Spezifikation zu Testomatio exportiert wird"},
    {"keyword": "Then", "title": "werden die Schlüsselworte ins Englische übersetzt"},
]

SEARCH_STEPS = [
    {"keyword": "Given", "title": "I open the search page"},
    {"keyword": "Given", "title": "This should be replaced with Given"},
    {"keyword": "When", "title": 'I search for "cucumber"'},
    {"keyword": "Then", "title": "I see results"},
    {"keyword": "Then", "title": "This step keyword should not be taken"},
    {"keyword": "Then", "title": "no ads are shown"},
]

# Trimmed down keyword tables with overlapping literals
TEST_DIALECTS = {
    "en": {
        "name": "English",
        "native": "English",
        "given": ["* ", "Given "],
        "when": ["* ", "When "],
        "then": ["* ", "Then "],
        "and": ["* ", "And "],
        "but": ["* ", "But "],
        "scenario": ["Example", "Scenario"],
        "scenarioOutline": ["Scenario Outline", "Scenario Template"],
        "feature": ["Feature"],
    },
    "de": {
        "name": "German",
        "native": "Deutsch",
        "given": ["* ", "Angenommen ", "Gegeben sei "],
        "when": ["* ", "Wenn "],
        "then": ["* ", "Dann "],
        "and": ["* ", "Und "],
        "but": ["* ", "Aber "],
        "scenario": ["Beispiel", "Szenario"],
        "scenarioOutline": ["Szenariogrundriss", "Szenarien"],
        "feature": ["Funktionalität", "Funktion"],
    },
}

TRANSLATE_LINE_TEST_DATA = [
    ("    Angenommen die Spezifikation", "    Given die Spezifikation"),
    ("    Gegeben sei ein Konto", "    Given ein Konto"),
    ("    Wenn ich klicke", "    When ich klicke"),
    ("    Dann sehe ich", "    Then sehe ich"),
    ("    Und noch etwas", "    And noch etwas"),
    ("    Aber nicht das", "    But nicht das"),
    ("  Szenario: Anmeldung", "  Example: Anmeldung"),
    ("  Szenariogrundriss: Anmeldung", "  Scenario Outline: Anmeldung"),
    ("Funktionalität: Konto", "Feature: Konto"),
    ("    * ein Stern", "    Given ein Stern"),
]

TRANSLATE_LINE_TEST_IDS = [
    "given",
    "given with second literal",
    "when",
    "then",
    "and",
    "but",
    "scenario",
    "scenario outline wins over scenario prefix",
    "feature",
    "wildcard maps to first english keyword",
]

UNCHANGED_LINE_TEST_DATA = [
    "",
    "      | weight | price |",
    "  @smoke @slow",
    "    # Angenommen is only a comment here",
    "  Ein Absatz ohne Schlüsselwort",
]
