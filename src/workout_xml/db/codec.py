"""XML serialization for regimens.

Document layout::

    <regimen>
      <exercise>
        <name displayName="Name">Squat</name>
        <bodyPart displayName="Muscle group(s)">Legs</bodyPart>
        <sets displayName="# of sets">3</sets>
        <reps displayName="# of reps">10</reps>
        <weight displayName="Weight (lbs)">135</weight>
      </exercise>
    </regimen>
"""

from xml.etree.ElementTree import Element, ParseError, SubElement, fromstring, indent, tostring

from ..exceptions import RegimenFormatError
from ..models.exercise import EXERCISE_FIELDS, Exercise, Regimen
from ..utils.text import find_xml_illegal_chars

ROOT_TAG = "regimen"
EXERCISE_TAG = "exercise"
LABEL_ATTRIBUTE = "displayName"


def regimen_to_xml(regimen: Regimen) -> bytes:
    """Serialize a regimen to an XML document.

    Raises:
        RegimenFormatError: If a value holds characters XML cannot represent.
    """
    root = Element(ROOT_TAG)
    for exercise in regimen:
        exercise_elem = SubElement(root, EXERCISE_TAG)
        for exercise_field, value in exercise.fields():
            illegal = find_xml_illegal_chars(value)
            if illegal:
                raise RegimenFormatError(
                    f"{exercise_field.label} of {exercise.name!r} contains characters "
                    f"not allowed in XML: {illegal!r}"
                )
            field_elem = SubElement(
                exercise_elem, exercise_field.tag, {LABEL_ATTRIBUTE: exercise_field.label}
            )
            field_elem.text = value

    indent(root)
    return tostring(root, encoding="utf-8", xml_declaration=True)


def _exercise_from_element(elem: Element) -> Exercise:
    if elem.tag != EXERCISE_TAG:
        raise RegimenFormatError(f"Unexpected element <{elem.tag}> in regimen")

    children = list(elem)
    tags = [child.tag for child in children]
    expected = [f.tag for f in EXERCISE_FIELDS]
    if tags != expected:
        raise RegimenFormatError(f"Exercise fields {tags} do not match {expected}")

    data = {}
    for exercise_field, child in zip(EXERCISE_FIELDS, children):
        if len(child):
            raise RegimenFormatError(f"Field <{child.tag}> must contain only text")
        data[exercise_field.key] = child.text or ""

    return Exercise.from_dict(data)


def regimen_from_xml(data: bytes | str) -> Regimen:
    """Parse a regimen from an XML document.

    Raises:
        RegimenFormatError: If the document is not well-formed or does not
            have the regimen layout.
    """
    try:
        root = fromstring(data)
    except ParseError as e:
        raise RegimenFormatError(f"Malformed XML: {e}") from e

    if root.tag != ROOT_TAG:
        raise RegimenFormatError(f"Expected <{ROOT_TAG}> root, found <{root.tag}>")

    return Regimen(exercises=[_exercise_from_element(elem) for elem in root])
