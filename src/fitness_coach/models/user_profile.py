"""User profile data models."""

from dataclasses import dataclass


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    """Body mass index from height in centimetres and weight in kilograms."""
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def bmi_category(bmi: float) -> str:
    """Map a BMI value to its WHO category label."""
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal weight"
    if bmi < 30:
        return "Overweight"
    return "Obese"


@dataclass
class UserProfile:
    """Fitness attributes collected from the form.

    Every field is a free-form string, exactly as submitted. Numeric hints
    (age 10-100, height 100-250 cm, weight 30-300 kg) are enforced by the
    form only.
    """

    name: str
    age: str
    gender: str
    height: str  # cm
    weight: str  # kg
    fitness_goal: str
    fitness_level: str
    workout_location: str
    dietary_preference: str
    medical_history: str = ""
    stress_level: str = ""

    def to_dict(self) -> dict:
        """Convert to the camelCase form payload."""
        return {
            "name": self.name,
            "age": self.age,
            "gender": self.gender,
            "height": self.height,
            "weight": self.weight,
            "fitnessGoal": self.fitness_goal,
            "fitnessLevel": self.fitness_level,
            "workoutLocation": self.workout_location,
            "dietaryPreference": self.dietary_preference,
            "medicalHistory": self.medical_history,
            "stressLevel": self.stress_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from a form payload; absent fields become empty strings."""

        def field_value(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            name=field_value("name"),
            age=field_value("age"),
            gender=field_value("gender"),
            height=field_value("height"),
            weight=field_value("weight"),
            fitness_goal=field_value("fitnessGoal"),
            fitness_level=field_value("fitnessLevel"),
            workout_location=field_value("workoutLocation"),
            dietary_preference=field_value("dietaryPreference"),
            medical_history=field_value("medicalHistory"),
            stress_level=field_value("stressLevel"),
        )

    @property
    def bmi(self) -> float | None:
        """BMI if height and weight parse as numbers, else None."""
        try:
            return calculate_bmi(float(self.height), float(self.weight))
        except (ValueError, ZeroDivisionError):
            return None

    def get_summary(self) -> str:
        """Generate a short human-readable summary."""
        summary = f"Name: {self.name}\n"
        summary += f"Age: {self.age}, Gender: {self.gender}\n"
        summary += f"Height: {self.height}cm, Weight: {self.weight}kg\n"

        bmi = self.bmi
        if bmi is not None:
            summary += f"BMI: {bmi:.1f} ({bmi_category(bmi)})\n"

        summary += f"Goal: {self.fitness_goal}, Level: {self.fitness_level}\n"
        summary += f"Location: {self.workout_location}, Diet: {self.dietary_preference}\n"

        if self.medical_history:
            summary += f"Medical history: {self.medical_history}\n"
        if self.stress_level:
            summary += f"Stress level: {self.stress_level}\n"

        return summary
