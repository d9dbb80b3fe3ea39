from domain.entities import ContentKind, ContentRequest

TRENDING_COUNT = 10
CATEGORY_COUNT = 10
SEARCH_COUNT = 8

IMAGE_PATH_RULE = (
    "Only supply poster_path and backdrop_path values that are real, verifiable TMDB image paths "
    "(starting with '/'). If you are not certain a path exists, leave it blank instead of inventing one."
)

CATALOG_SYSTEM_INSTRUCTION = (
    "You are a movie and TV database API. Return accurate, factual data. "
    "Never fabricate image paths; if a real TMDB path is unknown, leave the field empty."
)

SEARCH_SYSTEM_INSTRUCTION = (
    "You are an intelligent movie recommendation engine backed by a factual movie database. "
    "Understand nuance (e.g. 'sad movies' -> drama, 'mind bending' -> thriller). "
    "Include a short 'reason' for every recommendation. "
    "Never fabricate image paths; if a real TMDB path is unknown, leave the field empty."
)

CHAT_SYSTEM_INSTRUCTION = (
    "You are 'Movistore AI', a helpful movie enthusiast assistant. Keep answers short, witty, and engaging. "
    "If the user asks for recommendations, list titles clearly."
)

CATEGORY_PROMPTS = {
    "tv": "Generate a list of {count} trending TV shows and series from the last 3 years. Ensure they are TV shows, not movies.",
    "movies": "Generate a list of {count} highly acclaimed movies from various genres (Action, Drama, Comedy) released recently.",
    "new": "Generate a list of {count} new and popular releases (movies or TV) that are currently creating buzz globally.",
    "web": "Generate a list of {count} popular web series (Netflix Originals, Amazon Prime Originals, etc.) that are trending.",
}
DEFAULT_CATEGORY_PROMPT = "Generate a list of {count} trending movies."


def normalize_query(query: str) -> str:
    return query.lower().strip()


def trending_request() -> ContentRequest:
    instruction = (
        f"Generate a list of {TRENDING_COUNT} currently trending or highly rated movies "
        "(a mix of Action, Sci-Fi and Drama) released in the last 5 years. "
        f"{IMAGE_PATH_RULE}"
    )
    return ContentRequest(
        kind=ContentKind.TRENDING,
        cache_key="trending",
        instruction=instruction,
        system_instruction=CATALOG_SYSTEM_INSTRUCTION,
        count=TRENDING_COUNT,
    )


def category_request(category: str) -> ContentRequest:
    template = CATEGORY_PROMPTS.get(category, DEFAULT_CATEGORY_PROMPT)
    return ContentRequest(
        kind=ContentKind.CATEGORY,
        cache_key=f"category_{category}",
        instruction=f"{template.format(count=CATEGORY_COUNT)} {IMAGE_PATH_RULE}",
        system_instruction=CATALOG_SYSTEM_INSTRUCTION,
        count=CATEGORY_COUNT,
        params={"category": category},
    )


def search_request(query: str) -> ContentRequest:
    instruction = (
        f'User query: "{query}". Suggest {SEARCH_COUNT} movies that match this query. '
        "It could be a mood, a genre, a specific actor, or a plot description. "
        "For every movie fill in 'reason' with one human-readable sentence explaining why it matches. "
        f"{IMAGE_PATH_RULE}"
    )
    return ContentRequest(
        kind=ContentKind.SEARCH,
        cache_key=f"search_{normalize_query(query)}",
        instruction=instruction,
        system_instruction=SEARCH_SYSTEM_INSTRUCTION,
        count=SEARCH_COUNT,
        params={"query": query},
    )
