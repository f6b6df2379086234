from .main import Restaurant, User, UserManager, WEEKDAYS, default_opening_hours
