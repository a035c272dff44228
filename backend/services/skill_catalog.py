"""Static lookup tables for skill matching and learning recommendations.

All tables are built once at import and never written afterwards.
"""

from types import MappingProxyType

# ---------------------------------------------------------------------------
# Skill synonyms: canonical label -> alternate spellings / abbreviations
# ---------------------------------------------------------------------------
SKILL_SYNONYMS: MappingProxyType = MappingProxyType({
    "javascript": frozenset({"js", "ecmascript", "node.js", "nodejs"}),
    "typescript": frozenset({"ts"}),
    "react": frozenset({"reactjs", "react.js"}),
    "angular": frozenset({"angularjs"}),
    "vue": frozenset({"vuejs", "vue.js"}),
    "python": frozenset({"py"}),
    "machine learning": frozenset({"ml", "artificial intelligence", "ai"}),
    "css": frozenset({"css3", "cascading style sheets"}),
    "html": frozenset({"html5", "hypertext markup language"}),
    "sql": frozenset({"mysql", "postgresql", "database"}),
    "c++": frozenset({"cpp", "c plus plus"}),
    "c#": frozenset({"csharp", "c sharp"}),
    "ui/ux": frozenset({"user interface", "user experience", "ui design", "ux design"}),
    "frontend": frozenset({"front-end", "front end"}),
    "backend": frozenset({"back-end", "back end"}),
    "fullstack": frozenset({"full-stack", "full stack"}),
    "devops": frozenset({"dev ops", "development operations"}),
    "api": frozenset({"rest api", "restful", "web api"}),
    "aws": frozenset({"amazon web services"}),
    "gcp": frozenset({"google cloud platform"}),
    "azure": frozenset({"microsoft azure"}),
})

# ---------------------------------------------------------------------------
# Learning platforms per skill
# ---------------------------------------------------------------------------
LEARNING_PLATFORMS: MappingProxyType = MappingProxyType({
    "javascript": ("FreeCodeCamp", "MDN Web Docs", "JavaScript.info"),
    "react": ("React Documentation", "React Tutorial", "Scrimba React Course"),
    "python": ("Python.org Tutorial", "Codecademy Python", "Real Python"),
    "machine learning": ("Coursera ML Course", "Kaggle Learn", "Fast.ai"),
    "sql": ("W3Schools SQL", "SQLBolt", "Mode SQL Tutorial"),
    "aws": ("AWS Training", "A Cloud Guru", "AWS Documentation"),
    "css": ("CSS-Tricks", "Flexbox Froggy", "Grid Garden"),
    "node.js": ("Node.js Documentation", "NodeSchool", "Express.js Tutorial"),
})

DEFAULT_PLATFORMS: tuple[str, ...] = ("Coursera", "Udemy", "YouTube tutorials")

# ---------------------------------------------------------------------------
# Learning priority
# ---------------------------------------------------------------------------
HIGH_PRIORITY_SKILLS: frozenset[str] = frozenset({
    "javascript", "python", "react", "sql", "css", "html",
})

MEDIUM_PRIORITY_SKILLS: frozenset[str] = frozenset({
    "node.js", "typescript", "angular", "vue", "aws", "docker",
})

# ---------------------------------------------------------------------------
# Match level bands, highest threshold first.
# (min_percentage, level, color, description, icon)
# ---------------------------------------------------------------------------
MATCH_LEVEL_BANDS: tuple[tuple[int, str, str, str, str], ...] = (
    (90, "Excellent", "#10b981",
     "Outstanding skill match! You have almost all required skills.", "🎯"),
    (75, "Good", "#059669",
     "Strong skill match! You meet most requirements.", "✅"),
    (50, "Moderate", "#f59e0b",
     "Decent skill match. Consider developing missing skills.", "⚡"),
    (25, "Fair", "#f97316",
     "Some skills match. Significant skill development needed.", "📈"),
    (0, "Low", "#ef4444",
     "Limited skill match. Consider skill development or alternative roles.", "📚"),
)
