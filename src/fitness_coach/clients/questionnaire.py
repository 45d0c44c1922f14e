"""Interactive terminal version of the profile form."""

import questionary
from questionary import Style

from ..models.user_profile import UserProfile

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#6366f1 bold"),
        ("question", "bold"),
        ("answer", "fg:#10b981 bold"),
        ("pointer", "fg:#6366f1 bold"),
        ("highlighted", "fg:#6366f1 bold"),
        ("selected", "fg:#10b981"),
        ("separator", "fg:#10b981"),
        ("instruction", ""),
        ("text", ""),
    ]
)

GOAL_CHOICES = [
    questionary.Choice("Weight Loss", "weight-loss"),
    questionary.Choice("Muscle Gain", "muscle-gain"),
    questionary.Choice("Maintenance", "maintenance"),
    questionary.Choice("Build Endurance", "endurance"),
    questionary.Choice("Improve Flexibility", "flexibility"),
]

LEVEL_CHOICES = [
    questionary.Choice("Beginner", "beginner"),
    questionary.Choice("Intermediate", "intermediate"),
    questionary.Choice("Advanced", "advanced"),
]

LOCATION_CHOICES = [
    questionary.Choice("Home", "home"),
    questionary.Choice("Gym", "gym"),
    questionary.Choice("Outdoor", "outdoor"),
]

DIET_CHOICES = [
    questionary.Choice("Vegetarian", "vegetarian"),
    questionary.Choice("Non-Vegetarian", "non-vegetarian"),
    questionary.Choice("Vegan", "vegan"),
    questionary.Choice("Keto", "keto"),
    questionary.Choice("Paleo", "paleo"),
]

STRESS_CHOICES = [
    questionary.Choice("Skip", ""),
    questionary.Choice("Low", "low"),
    questionary.Choice("Moderate", "moderate"),
    questionary.Choice("High", "high"),
]

GENDER_CHOICES = [
    questionary.Choice("Male", "male"),
    questionary.Choice("Female", "female"),
    questionary.Choice("Other", "other"),
]


def _in_range(low: int, high: int):
    """Validator for numeric answers, mirroring the web form's min/max hints."""

    def validate(answer: str):
        try:
            value = float(answer)
        except ValueError:
            return "Please enter a number"
        if not low <= value <= high:
            return f"Please enter a value between {low} and {high}"
        return True

    return validate


class ProfileQuestionnaire:
    """Collects a UserProfile in the terminal."""

    async def collect_profile(self) -> UserProfile:
        """Run the questionnaire."""
        print("\n=== Fitness Profile ===\n")

        name = await questionary.text("What's your name?", style=custom_style).ask_async()
        age = await questionary.text(
            "Age:", validate=_in_range(10, 100), style=custom_style
        ).ask_async()
        gender = await questionary.select(
            "Gender:", choices=GENDER_CHOICES, style=custom_style
        ).ask_async()
        height = await questionary.text(
            "Height (cm):", validate=_in_range(100, 250), style=custom_style
        ).ask_async()
        weight = await questionary.text(
            "Weight (kg):", validate=_in_range(30, 300), style=custom_style
        ).ask_async()

        fitness_goal = await questionary.select(
            "What's your fitness goal?", choices=GOAL_CHOICES, style=custom_style
        ).ask_async()
        fitness_level = await questionary.select(
            "What's your fitness level?", choices=LEVEL_CHOICES, style=custom_style
        ).ask_async()
        workout_location = await questionary.select(
            "Where will you work out?", choices=LOCATION_CHOICES, style=custom_style
        ).ask_async()
        dietary_preference = await questionary.select(
            "Dietary preference:", choices=DIET_CHOICES, style=custom_style
        ).ask_async()
        stress_level = await questionary.select(
            "Stress level (optional):", choices=STRESS_CHOICES, style=custom_style
        ).ask_async()
        medical_history = await questionary.text(
            "Medical history or injuries (optional):",
            default="",
            style=custom_style,
        ).ask_async()

        return UserProfile(
            name=name or "User",
            age=age or "",
            gender=gender or "",
            height=height or "",
            weight=weight or "",
            fitness_goal=fitness_goal or "",
            fitness_level=fitness_level or "",
            workout_location=workout_location or "",
            dietary_preference=dietary_preference or "",
            medical_history=medical_history or "",
            stress_level=stress_level or "",
        )
