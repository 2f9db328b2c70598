"""Static activity catalog and weekend templates."""

from typing import Iterator

from .core.activities import Activity, WeekendTemplate, WeekendTheme

FOOD = "#F59E0B"
OUTDOOR = "#10B981"
ENTERTAINMENT = "#8B5CF6"
WELLNESS = "#EC4899"
SOCIAL = "#06B6D4"
CREATIVE = "#EF4444"
LEARNING = "#3B82F6"
HOME = "#84CC16"


def _activity(id, name, category, description, duration, icon, mood, tags, color, is_flexible=True):
    return Activity(
        id=id,
        name=name,
        category=category,
        description=description,
        duration=duration,
        icon=icon,
        mood=tuple(mood),
        is_flexible=is_flexible,
        tags=tuple(tags),
        color=color,
    )


ACTIVITIES: list[Activity] = [
    # Food & Dining
    _activity("brunch-cafe", "Brunch at Local Café", "food",
              "Enjoy a leisurely brunch with friends at your favorite local spot", 120, "🥐",
              ["happy", "relaxed", "social"], ["social", "outdoor seating", "coffee"], FOOD),
    _activity("cooking-experiment", "Try New Recipe", "food",
              "Experiment with a new cuisine or cooking technique", 90, "👨‍🍳",
              ["productive", "cozy"], ["home", "creative", "learning"], FOOD),
    _activity("farmers-market", "Visit Farmers Market", "food",
              "Browse fresh produce and local goods", 60, "🧺",
              ["happy", "energetic"], ["outdoor", "social", "healthy"], FOOD),
    # Outdoor
    _activity("hiking-trail", "Nature Hike", "outdoor",
              "Explore scenic trails and connect with nature", 180, "🥾",
              ["energetic", "adventurous"], ["exercise", "nature", "fresh air"], OUTDOOR),
    _activity("park-picnic", "Park Picnic", "outdoor",
              "Relax in the park with homemade treats", 120, "🧺",
              ["relaxed", "happy"], ["food", "nature", "social"], OUTDOOR),
    _activity("bike-ride", "Bike Ride", "outdoor",
              "Cycle through the city or countryside", 90, "🚴‍♀️",
              ["energetic", "adventurous"], ["exercise", "exploration"], OUTDOOR),
    _activity("beach-day", "Beach Day", "outdoor",
              "Soak up the sun and enjoy the waves", 240, "🏖️",
              ["relaxed", "happy"], ["water", "sun", "relaxation"], OUTDOOR),
    # Entertainment
    _activity("movie-night", "Movie Marathon", "entertainment",
              "Binge-watch your favorite series or discover new films", 180, "🍿",
              ["cozy", "relaxed"], ["home", "comfort", "snacks"], ENTERTAINMENT),
    _activity("live-music", "Live Music Event", "entertainment",
              "Experience live performances at a local venue", 150, "🎵",
              ["energetic", "happy"], ["social", "culture", "music"], ENTERTAINMENT, is_flexible=False),
    _activity("museum-visit", "Museum Visit", "entertainment",
              "Explore art, history, or science exhibitions", 120, "🏛️",
              ["productive", "happy"], ["culture", "learning", "art"], ENTERTAINMENT),
    _activity("board-games", "Board Game Night", "entertainment",
              "Challenge friends to strategic gameplay", 120, "🎲",
              ["happy", "social"], ["social", "home", "strategy"], ENTERTAINMENT),
    # Wellness
    _activity("yoga-session", "Yoga Practice", "wellness",
              "Center yourself with mindful movement", 60, "🧘‍♀️",
              ["relaxed", "productive"], ["exercise", "mindfulness", "flexibility"], WELLNESS),
    _activity("spa-day", "Home Spa Day", "wellness",
              "Pamper yourself with self-care rituals", 150, "🛁",
              ["relaxed", "cozy"], ["self-care", "home", "relaxation"], WELLNESS),
    _activity("meditation", "Meditation Session", "wellness",
              "Practice mindfulness and inner peace", 30, "🕯️",
              ["relaxed", "productive"], ["mindfulness", "quiet", "spiritual"], WELLNESS),
    _activity("gym-workout", "Gym Workout", "wellness",
              "Energize your body with exercise", 90, "💪",
              ["energetic", "productive"], ["exercise", "strength", "endurance"], WELLNESS),
    # Social
    _activity("friend-hangout", "Friends Hangout", "social",
              "Catch up with friends over coffee or drinks", 120, "👥",
              ["happy", "social"], ["friendship", "conversation", "bonding"], SOCIAL),
    _activity("dinner-party", "Host Dinner Party", "social",
              "Bring people together for a memorable meal", 180, "🍽️",
              ["happy", "social"], ["hosting", "food", "gathering"], SOCIAL),
    _activity("karaoke-night", "Karaoke Night", "social",
              "Sing your heart out with friends", 150, "🎤",
              ["happy", "energetic"], ["music", "fun", "performance"], SOCIAL),
    # Creative
    _activity("art-project", "Art Project", "creative",
              "Express yourself through painting, drawing, or crafts", 120, "🎨",
              ["productive", "relaxed"], ["artistic", "hands-on", "expression"], CREATIVE),
    _activity("photography-walk", "Photography Walk", "creative",
              "Capture beautiful moments around your city", 90, "📸",
              ["adventurous", "productive"], ["artistic", "exploration", "outdoor"], CREATIVE),
    _activity("writing-session", "Creative Writing", "creative",
              "Work on your novel, poetry, or journal", 90, "✍️",
              ["productive", "cozy"], ["literary", "quiet", "reflection"], CREATIVE),
    # Learning
    _activity("language-practice", "Language Learning", "learning",
              "Practice a new language or skill", 60, "📚",
              ["productive"], ["education", "skill-building", "growth"], LEARNING),
    _activity("online-course", "Online Course", "learning",
              "Take a class on a topic you're passionate about", 120, "💻",
              ["productive"], ["education", "digital", "self-improvement"], LEARNING),
    _activity("book-reading", "Reading Time", "learning",
              "Dive into a good book or audiobook", 90, "📖",
              ["relaxed", "productive"], ["literature", "quiet", "knowledge"], LEARNING),
    # Home
    _activity("home-organization", "Organize Space", "home",
              "Declutter and organize your living space", 120, "🏠",
              ["productive"], ["cleaning", "organization", "productivity"], HOME),
    _activity("gardening", "Gardening", "home",
              "Tend to plants and create a beautiful garden", 90, "🌱",
              ["relaxed", "productive"], ["nature", "nurturing", "outdoor"], HOME),
    _activity("home-improvement", "DIY Project", "home",
              "Work on home improvement or decoration", 180, "🔨",
              ["productive"], ["building", "improvement", "hands-on"], HOME),
]


WEEKEND_TEMPLATES: list[WeekendTemplate] = [
    WeekendTemplate(
        id="lazy-weekend",
        name="Lazy Weekend",
        description="Perfect for recharging and taking it slow",
        theme=WeekendTheme.LAZY,
        icon="😴",
        suggested_activities=(
            "movie-night", "spa-day", "book-reading", "meditation", "brunch-cafe", "home-organization",
        ),
    ),
    WeekendTemplate(
        id="adventurous-weekend",
        name="Adventure Time",
        description="For thrill-seekers and explorers",
        theme=WeekendTheme.ADVENTUROUS,
        icon="🗻",
        suggested_activities=(
            "hiking-trail", "bike-ride", "photography-walk", "beach-day", "live-music", "farmers-market",
        ),
    ),
    WeekendTemplate(
        id="family-weekend",
        name="Family Fun",
        description="Quality time with loved ones",
        theme=WeekendTheme.FAMILY,
        icon="👨‍👩‍👧‍👦",
        suggested_activities=(
            "park-picnic", "board-games", "cooking-experiment", "museum-visit", "gardening", "movie-night",
        ),
    ),
    WeekendTemplate(
        id="wellness-weekend",
        name="Wellness Focus",
        description="Prioritize your mental and physical health",
        theme=WeekendTheme.WELLNESS,
        icon="🧘‍♀️",
        suggested_activities=(
            "yoga-session", "meditation", "spa-day", "hiking-trail", "gym-workout", "book-reading",
        ),
    ),
    WeekendTemplate(
        id="social-weekend",
        name="Social Butterfly",
        description="Connect and have fun with friends",
        theme=WeekendTheme.SOCIAL,
        icon="🎉",
        suggested_activities=(
            "friend-hangout", "dinner-party", "karaoke-night", "brunch-cafe", "live-music", "board-games",
        ),
    ),
    WeekendTemplate(
        id="productive-weekend",
        name="Get Things Done",
        description="Accomplish goals and learn new skills",
        theme=WeekendTheme.PRODUCTIVE,
        icon="✅",
        suggested_activities=(
            "language-practice", "online-course", "art-project",
            "home-improvement", "writing-session", "home-organization",
        ),
    ),
]


class Catalog:
    """Read-only lookup over a set of activities."""

    def __init__(self, activities: list[Activity] | None = None):
        self._activities = {a.id: a for a in (ACTIVITIES if activities is None else activities)}

    def get(self, activity_id: str) -> Activity | None:
        return self._activities.get(activity_id)

    def by_category(self, category: str) -> list[Activity]:
        return [a for a in self._activities.values() if a.category == category]

    def search(self, query: str) -> list[Activity]:
        """Case-insensitive match on name, description or tags."""
        q = query.lower()
        return [
            a
            for a in self._activities.values()
            if q in a.name.lower() or q in a.description.lower() or any(q in t.lower() for t in a.tags)
        ]

    def __iter__(self) -> Iterator[Activity]:
        return iter(self._activities.values())

    def __len__(self) -> int:
        return len(self._activities)

    def __contains__(self, activity_id: str) -> bool:
        return activity_id in self._activities


def get_template(template_id: str) -> WeekendTemplate | None:
    return next((t for t in WEEKEND_TEMPLATES if t.id == template_id), None)
