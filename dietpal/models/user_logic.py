VALID_SEXES = ["male", "female"]
VALID_GOALS = ["Fat Loss", "General Health / Maintenance", "Build Muscle"]

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly active": 1.375,
    "moderately active": 1.55,
    "very active": 1.725,
    "extra active": 1.9
}

# Onboarding form values -> goal names used by the calculator
GOAL_MAP = {
    'lose': 'Fat Loss',
    'build': 'Build Muscle',
    'maintain': 'General Health / Maintenance',
}

# 7700 kcal ≈ 1 kg of body fat
KCAL_PER_KG_FAT = 7700


def map_workouts_to_activity_level(workouts_per_week: int) -> str:
    """Map workouts per week to activity level"""
    if workouts_per_week <= 0:
        return "sedentary"
    elif workouts_per_week <= 2:
        return "lightly active"
    elif workouts_per_week <= 5:
        return "moderately active"
    else:
        return "extra active"


class user:
    def __init__(self, sex, height, age, weight, activity_level, planned_weekly_weight_loss=None):
        if sex not in VALID_SEXES:
            raise ValueError("Sex must be 'male' or 'female'.")
        self.sex = sex

        self.height = height
        self.age = age
        self.weight = weight
        self.planned_weekly_weight_loss = planned_weekly_weight_loss  # in kg/week

        if activity_level not in ACTIVITY_MULTIPLIERS:
            raise ValueError(f"Activity level must be one of: {', '.join(ACTIVITY_MULTIPLIERS)}.")
        self.activity_level = activity_level

    def get_bmr(self):
        """Mifflin-St Jeor basal metabolic rate"""
        base = 10 * self.weight + 6.25 * self.height - 5 * self.age
        return base + 5 if self.sex == "male" else base - 161

    def get_tdee(self):
        """Calculate Total Daily Energy Expenditure (TDEE)"""
        return self.get_bmr() * ACTIVITY_MULTIPLIERS[self.activity_level]

    def target_calories(self, goal):
        """Daily calorie target for the given goal"""
        if goal not in VALID_GOALS:
            raise ValueError(f"Goal must be one of: {', '.join(VALID_GOALS)}.")

        tdee = self.get_tdee()

        if goal == "Fat Loss":
            if self.planned_weekly_weight_loss is None:
                raise ValueError("planned_weekly_weight_loss must be provided for weight loss calculations.")
            daily_deficit = (self.planned_weekly_weight_loss * KCAL_PER_KG_FAT) / 7
            return tdee - daily_deficit
        elif goal == "Build Muscle":
            return tdee * 1.10
        return tdee
