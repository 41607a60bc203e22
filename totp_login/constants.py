"""Constants for the login flow."""


# Google URLs
GOOGLE_MAIL_URL = "https://mail.google.com"

# Element Selectors
EMAIL_SELECTOR = "input[type=email]"
PASSWORD_SELECTOR = "input[type=password]"
CODE_SELECTOR = "input[type=tel]"

GOOGLE_SUCCESS_SELECTOR = '[aria-label="Search mail"]'

# Hides the text caret so a blinking cursor never reads as a page change
CARET_STYLE = "* { caret-color: transparent !important; }"

# Clears the one-time code field without going through keyboard input
CLEAR_FIELD_SCRIPT = """
(selector) => {
    const field = document.querySelector(selector);
    if (field) {
        field.value = '';
        field.setAttribute('value', '');
    }
}
"""

SUBMIT_KEY = "Enter"

# Wait options for the success marker; it only has to be attached, not visible
TARGET_WAIT_OPTIONS = {"state": "attached"}

# Timeouts (in milliseconds)
DEFAULT_TIMEOUT = 30000
