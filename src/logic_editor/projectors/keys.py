"""Keys of the plain structure handed to the editor."""

COMPONENT_NAME_KEY = "name"
COMPONENT_LABEL_KEY = "label"
COMPONENT_MENU_KEY = "menu"
COMPONENT_MENU_LABEL_KEY = "mlabel"
COMPONENT_IDENTIFIERS_KEY = "identifiers"
COMPONENT_CONTROLS_KEY = "controls"

SOCKET_TYPE_KEY = "type"
SOCKET_LABEL_KEY = "label"
SOCKET_MULTIPLE_KEY = "multiple"

OUTPUTS_KEY = "outputs"
INPUTS_KEY = "inputs"

TYPE_NAME_KEY = "name"
TYPE_LABEL_KEY = "label"
TYPE_COMBINATIONS_KEY = "combines"

# Component names may not contain this; the editor uses it to join names.
COMPONENT_NAME_SEPARATOR = ":"
MENU_PATH_SEPARATOR = "/"
