"""
Lexical tables for topic detection: typo corrections, the ordered topic
keyword table used for replies, and the blueprint section table.

Tables are ordered sequences of ``(topic, keywords)`` pairs. Declaration order
is the priority order: when text matches keywords of several topics, the topic
declared first wins.

The reply table is curated so that no keyword contains a keyword of a topic
declared before it, which keeps every keyword classifying to its own topic.
Generic one-word triggers that would swallow unrelated words ("hi" in "this",
"eat" in "weather", "tell" in "tell me about") are left to the normalizer and
the fuzzy pass instead.
"""

# ─────────────────────────────────────────────────────────
#  TYPO / ABBREVIATION CORRECTIONS
# ─────────────────────────────────────────────────────────

# No canonical form may itself be a trigger, otherwise the result would depend
# on the order corrections are applied in.
CORRECTIONS = {
    # chat shorthand
    "wat": "what", "wht": "what", "whts": "whats",
    "u": "you", "ur": "your", "r": "are", "n": "and",
    "thnks": "thanks", "thx": "thanks", "pls": "please", "plz": "please",
    "frm": "from", "hi": "hello", "sup": "whats up",
    # identity
    "nam": "name", "nams": "names", "nime": "name", "nimes": "names",
    "ho": "who", "cal": "call", "caling": "calling",
    "identif": "identify", "identifing": "identifying",
    # habitat
    "liv": "live", "livng": "living", "hom": "home", "plac": "place",
    "locat": "locate", "locaton": "location", "locatons": "locations",
    "territor": "territory", "territores": "territories",
    # diet
    "eet": "eat", "eeting": "eating", "hnt": "hunt", "hnting": "hunting",
    "favort": "favorite", "favortes": "favorites", "foood": "food",
    "meel": "meal", "meels": "meals", "seel": "seal", "seels": "seals",
    # skills
    "skil": "skill", "skils": "skills", "specil": "special", "hel": "help",
    "abilty": "ability", "abilties": "abilities", "capabilites": "capabilities",
    # challenges
    "problm": "problem", "problms": "problems",
    "chalenge": "challenge", "chalenges": "challenges", "difcult": "difficult",
    "worr": "worry", "worring": "worrying", "concer": "concern", "issu": "issue",
    "troubl": "trouble", "hardst": "hardest", "struggl": "struggle",
    # message
    "mesage": "message", "mesages": "messages", "wan": "want", "shar": "share",
    "undrstand": "understand", "undrstanding": "understanding",
    # future
    "hop": "hope", "drem": "dream", "tomorow": "tomorrow", "comng": "coming",
    "ahed": "ahead", "visin": "vision",
    # spanish shorthand
    "q": "que", "xq": "por que", "pq": "por que",
}


# ─────────────────────────────────────────────────────────
#  REPLY TOPICS (priority order)
# ─────────────────────────────────────────────────────────

TOPIC_KEYWORDS = [
    ("identity", [
        "what is your name", "whats your name", "tell me your name",
        "introduce yourself", "what are you", "who are you", "your name", "identify",
        "name", "who", "call", "cómo te llamas", "como te llamas", "quién eres",
        "quien eres", "te llamas", "nombre",
    ]),
    ("habitat", [
        "where do you live", "where do you spend", "where in the arctic",
        "where are you", "spend time", "where", "live", "home", "place", "location",
        "located", "territory", "from", "dónde vives", "donde vives", "hogar",
        "territorio",
    ]),
    ("diet", [
        "what do you like to eat", "what do you hunt", "what do you eat",
        "favorite food", "you eat", "to eat", "eating", "food", "hunt", "hunting",
        "meal", "diet", "seal", "prey", "consume", "qué comes", "que comes", "comida",
        "comer", "foca", "cazar",
    ]),
    ("skills", [
        "how do you survive", "special skills", "survival skills", "what skills",
        "skill", "survive", "survival", "ability", "abilities", "capabilities",
        "special", "cold", "swim", "habilidades", "sobrevives", "sobrevivir", "nadar",
    ]),
    ("challenges", [
        "biggest problem", "what problems", "what challenges", "climate change",
        "problem", "challenge", "difficult", "worry", "concern", "issue", "trouble",
        "biggest", "hardest", "struggle", "melting", "mayor problema", "problema",
        "desafío", "desafio", "dificultad", "deshielo",
    ]),
    ("message", [
        "what do you want humans", "what should humans know", "message to humans",
        "one thing you want", "tell humans", "message", "humans", "human", "understand",
        "share", "know", "want", "mensaje", "humanos",
    ]),
    ("future", [
        "what do you hope", "what do you dream", "future arctic", "looks like",
        "will be", "future", "hope", "dream", "wish", "tomorrow", "ahead", "vision",
        "futuro", "esperanza", "sueño", "mañana",
    ]),
    ("math", [
        "mathematics", "calculation", "calculate", "multiply", "subtract", "divide",
        "plus", "minus", "equals", "numbers", "number", "math", "sum", "total",
        "calcular", "sumar", "restar", "multiplicar", "dividir", "numero",
        "matemáticas", "matematicas",
    ]),
    ("cooking", [
        "ingredients", "cooking", "recipe", "kitchen", "cook", "bake", "boil", "fry",
        "cocinar", "cocina", "receta", "ingredientes", "hornear", "hervir", "freír",
        "freir",
    ]),
    ("weather", [
        "temperature", "weather", "climate", "rain", "snow", "sunny", "cloudy", "windy",
        "clima", "temperatura", "lluvia", "nieve", "soleado", "nublado",
    ]),
    ("technology", [
        "programming", "computer", "software", "internet", "phone", "code", "app",
        "computadora", "teléfono", "telefono", "programación", "programacion",
        "código", "codigo", "aplicación", "aplicacion",
    ]),
    ("greeting", [
        "good morning", "good afternoon", "good evening", "hello there", "hey there",
        "hi there", "how are you", "whats up", "hello", "hey", "hii", "hola", "que tal",
        "qué tal", "cómo estás", "como estas", "buenos días", "buenos dias",
        "buenas tardes", "buenas noches",
    ]),
    ("general", [
        "tell me about", "cuéntame sobre", "cuentame sobre", "how do", "explain",
        "explica", "why", "when", "qué es", "que es", "por qué", "por que", "cuándo",
        "cuando", "dónde", "donde", "cómo", "como",
    ]),
]

TOPIC_ORDER = tuple(topic for topic, _ in TOPIC_KEYWORDS)

# Checked after the exact pass: "what is your ..." questions are about the bear
# even when the rest of the sentence matches no keyword.
SPECIAL_CASES = [
    ("what is your", "identity"),
    ("whats your", "identity"),
    ("what is ur", "identity"),
    ("whats ur", "identity"),
]


# ─────────────────────────────────────────────────────────
#  BLUEPRINT SECTIONS (display order)
# ─────────────────────────────────────────────────────────

# "sea ice" and "hielo" are listed under both habitat and challenges; habitat
# is declared first and takes them, and with "hielo" also "deshielo".
BLUEPRINT_KEYWORDS = [
    ("identity", [
        "your name", "name", "who are you", "who are", "introduce", "identity",
        "cómo te llamas", "como te llamas", "nombre", "quién eres", "quien eres",
        "te llamas",
    ]),
    ("habitat", [
        "where do you live", "where are you", "where in the arctic", "where", "live",
        "home", "location", "habitat", "territory", "sea ice", "ice floes", "north",
        "arctic",
        "dónde vives", "donde vives", "hogar", "lugar", "hábitat",
        "territorio", "ártico", "artico", "hielo",
    ]),
    ("diet", [
        "what do you eat", "eat", "food", "diet", "meal", "hunt", "hunting", "prey",
        "seal", "seals", "blubber", "fish",
        "qué comes", "que comes", "comes", "comer", "comida", "dieta", "cazar", "caza",
        "presa", "presas", "foca", "focas",
    ]),
    ("skills", [
        "skills", "special skills", "survive", "survival", "adapt", "adaptation",
        "adaptations", "ability", "abilities", "fur", "swim", "paws", "claws", "smell",
        "run", "fast", "strong",
        "habilidades", "especiales", "sobrevives", "sobrevivir", "adaptaciones",
        "adaptación", "adaptacion", "capacidad", "capacidades", "pelaje", "nadar",
        "patas", "garras", "olfato", "correr",
    ]),
    ("challenges", [
        "biggest problem", "what problems", "what challenges", "problem", "problems",
        "challenge", "challenges", "difficult", "concern", "issue", "trouble",
        "hardest", "struggle", "melting", "climate change", "warming", "ice is",
        "sea ice",
        "mayor problema", "problema", "problemas", "desafío", "desafio", "desafíos",
        "desafios", "dificultad", "preocupación", "preocupaciones", "calentamiento",
        "cambio climático", "cambio climatico", "deshielo", "hielo",
    ]),
    ("message", [
        "message to humans", "what should humans know", "what do you want humans",
        "humans should", "tell humans", "message", "humans", "people should",
        "mensaje a los humanos", "mensaje para los humanos", "humanos deben",
        "qué quieres que los humanos", "que quieres que los humanos", "mensaje",
        "humanos",
    ]),
    ("future", [
        "what do you hope", "hope", "dream", "future", "vision", "wish", "tomorrow",
        "ahead",
        "futuro", "esperas", "esperanza", "sueñas", "sueños", "sueño", "deseas",
        "deseo", "mañana",
    ]),
]

BLUEPRINT_SECTION_ORDER = tuple(section for section, _ in BLUEPRINT_KEYWORDS)
