"""workout-xml: a command-line workout regimen kept in an XML file."""

__version__ = "0.1.0"
