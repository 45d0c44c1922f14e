"""Prompt templates for plan, quote and image generation."""

from ..models.plan import ImageCategory
from ..models.user_profile import UserProfile


PLAN_PROMPT = """You are an expert fitness coach and nutritionist. Create a highly personalized and detailed fitness plan based on the following user data:

Name: {name}
Age: {age}
Gender: {gender}
Height: {height}cm
Weight: {weight}kg
Fitness Goal: {fitness_goal}
Fitness Level: {fitness_level}
Workout Location: {workout_location}
Dietary Preference: {dietary_preference}
Medical History: {medical_history}
Stress Level: {stress_level}

Create a comprehensive plan with:
1. A 7-day workout plan with specific exercises, sets, reps, and rest periods
2. A detailed daily diet plan with breakfast, lunch, dinner, and snacks (with approximate calories)
3. 5 personalized tips for success
4. A motivational quote

IMPORTANT: Respond ONLY with valid JSON in this EXACT format (no markdown, no code blocks, just pure JSON):
{{
  "userData": {{
    "name": "{name}",
    "fitnessGoal": "{fitness_goal}"
  }},
  "workoutPlan": [
    {{
      "day": "Monday",
      "exercises": [
        {{"name": "Exercise name", "sets": "3", "reps": "10-12", "rest": "60 seconds"}}
      ]
    }}
  ],
  "dietPlan": [
    {{
      "meal": "Breakfast",
      "items": ["Item 1", "Item 2"],
      "calories": "400"
    }}
  ],
  "tips": ["Tip 1", "Tip 2", "Tip 3", "Tip 4", "Tip 5"],
  "motivation": "Your motivational quote here"
}}"""


QUOTE_PROMPT = (
    "Generate a short, powerful, motivational fitness quote (maximum 15 words). "
    "Just the quote text, nothing else."
)


EXERCISE_IMAGE_PROMPT = (
    "professional fitness photography, athletic person performing {name} exercise, "
    "correct form, modern gym environment, high quality, 4k resolution, dynamic pose, "
    "proper lighting"
)

FOOD_IMAGE_PROMPT = (
    "professional food photography, delicious {name}, beautifully plated on elegant "
    "white plate, restaurant quality presentation, natural lighting, appetizing, "
    "high resolution, 4k, vibrant colors"
)


def build_plan_prompt(profile: UserProfile) -> str:
    """Build the plan-generation instruction for a user profile.

    Every profile value is embedded verbatim. Absent medical history reads
    as "None" and absent stress level as "Moderate".
    """
    return PLAN_PROMPT.format(
        name=profile.name,
        age=profile.age,
        gender=profile.gender,
        height=profile.height,
        weight=profile.weight,
        fitness_goal=profile.fitness_goal,
        fitness_level=profile.fitness_level,
        workout_location=profile.workout_location,
        dietary_preference=profile.dietary_preference,
        medical_history=profile.medical_history or "None",
        stress_level=profile.stress_level or "Moderate",
    )


def build_image_prompt(name: str, category: ImageCategory | str) -> str:
    """Expand an item name into a descriptive image prompt."""
    if ImageCategory.coerce(category) == ImageCategory.EXERCISE:
        return EXERCISE_IMAGE_PROMPT.format(name=name)
    return FOOD_IMAGE_PROMPT.format(name=name)
