"""Static content served when live generation fails."""

import random

from ..models.plan import DietMeal, Exercise, FitnessPlan, PlanSubject, WorkoutDay


FALLBACK_QUOTES = [
    "Your only limit is you. Push harder today! 💪",
    "Transform your body, transform your life!",
    "Every workout counts. Make it happen!",
    "Believe in yourself and crush your goals!",
    "Strong body, strong mind, unstoppable spirit!",
    "Progress, not perfection. Keep moving forward!",
    "You are stronger than you think!",
]


def fallback_plan() -> FitnessPlan:
    """Return the fixed general-fitness plan (7 days, 6 meals, 5 tips).

    A new object is built on every call so callers may mutate it freely.
    """
    return FitnessPlan(
        user_data=PlanSubject(name="User", fitness_goal="General Fitness"),
        workout_plan=[
            WorkoutDay(
                day="Monday - Upper Body",
                exercises=[
                    Exercise("Push-ups", "3", "10-15", "60 seconds"),
                    Exercise("Dumbbell Rows", "3", "12", "60 seconds"),
                    Exercise("Shoulder Press", "3", "10", "60 seconds"),
                ],
            ),
            WorkoutDay(
                day="Tuesday - Lower Body",
                exercises=[
                    Exercise("Squats", "4", "12", "90 seconds"),
                    Exercise("Lunges", "3", "10 each leg", "60 seconds"),
                    Exercise("Calf Raises", "3", "15", "45 seconds"),
                ],
            ),
            WorkoutDay(
                day="Wednesday - Cardio & Core",
                exercises=[
                    Exercise("Running", "1", "20 minutes", "N/A"),
                    Exercise("Plank", "3", "45 seconds", "30 seconds"),
                    Exercise("Bicycle Crunches", "3", "20", "30 seconds"),
                ],
            ),
            WorkoutDay(
                day="Thursday - Rest or Active Recovery",
                exercises=[
                    Exercise("Walking", "1", "30 minutes", "N/A"),
                    Exercise("Stretching", "1", "15 minutes", "N/A"),
                ],
            ),
            WorkoutDay(
                day="Friday - Full Body",
                exercises=[
                    Exercise("Burpees", "3", "10", "60 seconds"),
                    Exercise("Deadlifts", "3", "10", "90 seconds"),
                    Exercise("Pull-ups", "3", "8", "60 seconds"),
                ],
            ),
            WorkoutDay(
                day="Saturday - HIIT",
                exercises=[
                    Exercise("Jump Squats", "4", "15", "30 seconds"),
                    Exercise("Mountain Climbers", "4", "20", "30 seconds"),
                    Exercise("High Knees", "4", "30 seconds", "30 seconds"),
                ],
            ),
            WorkoutDay(
                day="Sunday - Rest",
                exercises=[
                    Exercise("Light Yoga", "1", "20 minutes", "N/A"),
                    Exercise("Meditation", "1", "10 minutes", "N/A"),
                ],
            ),
        ],
        diet_plan=[
            DietMeal(
                meal="Breakfast",
                items=["Oatmeal with berries", "2 eggs", "Green tea"],
                calories="450",
            ),
            DietMeal(
                meal="Mid-Morning Snack",
                items=["Greek yogurt", "Handful of almonds"],
                calories="200",
            ),
            DietMeal(
                meal="Lunch",
                items=["Grilled chicken breast", "Brown rice", "Mixed vegetables", "Salad"],
                calories="550",
            ),
            DietMeal(
                meal="Afternoon Snack",
                items=["Apple with peanut butter", "Protein shake"],
                calories="250",
            ),
            DietMeal(
                meal="Dinner",
                items=["Baked salmon", "Quinoa", "Steamed broccoli", "Sweet potato"],
                calories="600",
            ),
            DietMeal(
                meal="Evening Snack (Optional)",
                items=["Cottage cheese", "Cucumber slices"],
                calories="150",
            ),
        ],
        tips=[
            "Stay hydrated - drink at least 8 glasses of water daily",
            "Get 7-8 hours of quality sleep every night",
            "Track your progress with photos and measurements",
            "Focus on form over weight to prevent injuries",
            "Be consistent - results take time and dedication",
        ],
        motivation="The only bad workout is the one that didn't happen. Keep pushing! 💪",
    )


def fallback_quote(rng: random.Random | None = None) -> str:
    """Pick one of the fixed motivational quotes."""
    return (rng or random).choice(FALLBACK_QUOTES)
