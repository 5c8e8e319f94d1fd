from sightmint.adapters.classifier.parser import parse_response


def test_well_formed_response():
    result = parse_response("Animal: Red Fox\nDescription: A fox in a field")
    assert result.species == "Red Fox"
    assert result.description == "A fox in a field"
    assert result.is_animal is True


def test_value_keeps_text_after_first_colon():
    result = parse_response("Animal: Bird: Robin\nDescription: Note: perched on a branch")
    assert result.species == "Bird: Robin"
    assert result.description == "Note: perched on a branch"


def test_surrounding_chatter_and_crlf():
    raw = "Sure! Here is what I see.\r\nAnimal:   Grey Wolf  \r\nDescription: Two wolves at dusk\r\n"
    result = parse_response(raw)
    assert result.species == "Grey Wolf"
    assert result.description == "Two wolves at dusk"
    assert result.is_animal


def test_no_animal_anywhere_wins():
    raw = "Animal: Dog\nDescription: Just a lamp, No Animal present"
    result = parse_response(raw)
    assert result.species == "Dog"
    assert result.is_animal is False


def test_plain_no_animal():
    result = parse_response("No Animal")
    assert result.species == "Unknown"
    assert result.description == ""
    assert result.is_animal is False


def test_species_no_animal():
    result = parse_response("Animal: No Animal\nDescription: An empty chair")
    assert result.species == "No Animal"
    assert result.description == "An empty chair"
    assert result.is_animal is False


def test_no_prefix_lines_degrades_to_unknown():
    result = parse_response("I cannot tell what this is.")
    assert (result.species, result.description, result.is_animal) == ("Unknown", "", False)


def test_garbage_input_never_raises():
    for raw in ["", "\n\n", ":::", "Animal:", None, 42]:
        result = parse_response(raw)
        assert result.species == "Unknown"
        assert result.is_animal is False


def test_first_matching_line_wins():
    raw = "Animal: Otter\nAnimal: Beaver\nDescription: first\nDescription: second"
    result = parse_response(raw)
    assert result.species == "Otter"
    assert result.description == "first"


def test_prefix_must_start_the_line():
    result = parse_response("  Animal: Heron\nThe Description: something")
    assert result.species == "Unknown"
    assert result.description == ""


def test_unknown_species_is_not_an_animal():
    result = parse_response("Animal: Unknown\nDescription: Blurry shape")
    assert result.is_animal is False
    assert result.description == "Blurry shape"
