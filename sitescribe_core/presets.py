"""
Presets - fixed CSS, markup and acknowledgement payloads

Template and animation CSS are applied by the executor; form templates are
expanded by the form matcher; settings payloads are echoed back for the
app-setting actions.
"""

from html import escape
from typing import Dict, Optional

TEMPLATE_STYLES: Dict[str, str] = {
    "modern": """
body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; line-height: 1.6; color: #333; }
h1, h2, h3 { color: #2c3e50; margin-bottom: 1rem; }
p { margin-bottom: 1rem; }
.container { max-width: 1200px; margin: 0 auto; padding: 0 20px; }
.btn { background: #3498db; color: white; padding: 10px 20px; border: none; border-radius: 5px; cursor: pointer; }
.card { background: white; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); padding: 20px; margin: 20px 0; }
""",
    "professional": """
body { font-family: 'Georgia', serif; line-height: 1.8; color: #2c3e50; background: #f8f9fa; }
h1, h2, h3 { color: #1a252f; border-bottom: 2px solid #3498db; padding-bottom: 10px; }
p { text-align: justify; }
.container { max-width: 1000px; margin: 0 auto; padding: 20px; background: white; box-shadow: 0 0 20px rgba(0,0,0,0.1); }
.btn { background: #2c3e50; color: white; padding: 12px 24px; border: none; border-radius: 3px; font-weight: bold; }
""",
    "minimal": """
body { font-family: 'Arial', sans-serif; line-height: 1.6; color: #333; background: white; }
h1, h2, h3 { color: #000; font-weight: 300; }
p { color: #666; }
.container { max-width: 800px; margin: 0 auto; padding: 40px 20px; }
.btn { background: #000; color: white; padding: 10px 20px; border: none; }
""",
    "colorful": """
body { font-family: 'Comic Sans MS', cursive; line-height: 1.6; color: #333; background: linear-gradient(45deg, #ff6b6b, #4ecdc4); }
h1, h2, h3 { color: #fff; text-shadow: 2px 2px 4px rgba(0,0,0,0.3); }
p { color: #fff; text-shadow: 1px 1px 2px rgba(0,0,0,0.3); }
.container { max-width: 1200px; margin: 0 auto; padding: 20px; }
.btn { background: #ffd93d; color: #333; padding: 12px 24px; border: none; border-radius: 25px; font-weight: bold; }
""",
}

# name -> (class added to elements, keyframes css)
ANIMATIONS: Dict[str, tuple] = {
    "fade": ("fade-in", """
.fade-in { animation: fadeIn 1s ease-in; }
@keyframes fadeIn { from { opacity: 0; } to { opacity: 1; } }
"""),
    "slide": ("slide-in", """
.slide-in { animation: slideIn 0.8s ease-out; }
@keyframes slideIn { from { transform: translateX(-100%); } to { transform: translateX(0); } }
"""),
    "bounce": ("bounce", """
.bounce { animation: bounce 1s ease-in-out; }
@keyframes bounce { 0%, 20%, 50%, 80%, 100% { transform: translateY(0); } 40% { transform: translateY(-30px); } 60% { transform: translateY(-15px); } }
"""),
    "rotate": ("rotate", """
.rotate { animation: rotate 2s linear infinite; }
@keyframes rotate { from { transform: rotate(0deg); } to { transform: rotate(360deg); } }
"""),
}


def template_css(name: str) -> str:
    """CSS for a named template; unknown names give an empty block"""
    return TEMPLATE_STYLES.get((name or "").lower(), "")


# --- Form templates ---

def _field(label: str, tag: str, name: str, input_type: str = "text", required: bool = True) -> str:
    req = " required" if required else ""
    if tag == "textarea":
        control = f'<textarea id="{name}" name="{name}" rows="5"{req}></textarea>'
    else:
        control = f'<input type="{input_type}" id="{name}" name="{name}"{req}>'
    return f'<div class="form-group"><label for="{name}">{escape(label)}</label>{control}</div>'


FORM_TEMPLATES: Dict[str, Dict] = {
    "contact": {
        "title": "Contact Us",
        "fields": [
            ("Name", "input", "name", "text", True),
            ("Email", "input", "email", "email", True),
            ("Subject", "input", "subject", "text", False),
            ("Message", "textarea", "message", "", True),
        ],
        "submit": "Send Message",
    },
    "login": {
        "title": "Login",
        "fields": [
            ("Username or Email", "input", "username", "text", True),
            ("Password", "input", "password", "password", True),
            ("Remember me", "input", "remember", "checkbox", False),
        ],
        "submit": "Log In",
    },
    "registration": {
        "title": "Create Account",
        "fields": [
            ("First Name", "input", "first_name", "text", True),
            ("Last Name", "input", "last_name", "text", True),
            ("Email", "input", "email", "email", True),
            ("Password", "input", "password", "password", True),
            ("Confirm Password", "input", "confirm_password", "password", True),
        ],
        "submit": "Register",
    },
    "search": {
        "title": "Search",
        "fields": [
            ("Search", "input", "q", "search", False),
        ],
        "submit": "Search",
    },
    "feedback": {
        "title": "Feedback",
        "fields": [
            ("Name", "input", "name", "text", False),
            ("Email", "input", "email", "email", False),
            ("Rating (1-5)", "input", "rating", "number", True),
            ("Feedback", "textarea", "feedback", "", True),
        ],
        "submit": "Send Feedback",
    },
    "order": {
        "title": "Place an Order",
        "fields": [
            ("Full Name", "input", "name", "text", True),
            ("Email", "input", "email", "email", True),
            ("Product", "input", "product", "text", True),
            ("Quantity", "input", "quantity", "number", True),
            ("Shipping Address", "textarea", "address", "", True),
        ],
        "submit": "Place Order",
    },
}


def render_form(name: str, action: Optional[str] = None, method: str = "post") -> str:
    """Expand a named form template into a complete <form> fragment"""
    key = name if name in FORM_TEMPLATES else "contact"
    template = FORM_TEMPLATES[key]
    parts = [
        f'<form class="{key}-form" action="{escape(action or "#")}" method="{method}">',
        f"<h2>{escape(template['title'])}</h2>",
    ]
    for label, tag, field_name, input_type, required in template["fields"]:
        parts.append(_field(label, tag, field_name, input_type, required))
    parts.append(f'<button type="submit">{escape(template["submit"])}</button>')
    parts.append("</form>")
    return "\n".join(parts)


# --- App-setting payloads ---

KEYBOARD_SHORTCUTS = {
    "Ctrl+S": "Save file",
    "Ctrl+O": "Open file",
    "Ctrl+N": "New file",
    "Ctrl+Z": "Undo",
    "Ctrl+Y": "Redo",
    "F1": "Help",
    "Ctrl+Shift+T": "Toggle theme",
    "Ctrl+Shift+F": "Toggle fullscreen",
}

RECENT_FILES = ["index.html", "about.html", "contact.html"]

DEFAULT_SETTINGS = {
    "theme": "default",
    "fontSize": "medium",
    "language": "english",
    "autoSave": True,
    "notifications": True,
}

HELP_CONTENT = {
    "title": "SiteScribe Help",
    "sections": [
        {
            "title": "Basic Commands",
            "commands": [
                'Change text: "change heading to Welcome"',
                'Set background: "set background to blue"',
                'Add form: "add contact form"',
            ],
        },
        {
            "title": "App Features",
            "commands": [
                'Change theme: "change theme to dark"',
                'Set font size: "set font size to large"',
                'Show shortcuts: "show keyboard shortcuts"',
            ],
        },
    ],
}

ABOUT_INFO = {
    "name": "SiteScribe",
    "version": "1.0.0",
    "description": "AI-powered website editor",
    "author": "SiteScribe Team",
    "features": [
        "Natural language commands",
        "Real-time editing",
        "Multiple themes",
        "Auto-save functionality",
    ],
}
