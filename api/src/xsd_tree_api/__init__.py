"""XSD schema upload service producing UI-selectable element trees."""
