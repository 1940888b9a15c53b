# io/campus_data.py
# Sample University of Ghana campus layout: (name, category, x_m, y_m).
UG_LOCATIONS: list[tuple[str, str, float, float]] = [
    ("Main Gate", "Gate", 0.0, 0.0),
    ("Balme Library", "Library", 100.0, 50.0),
    ("Great Hall", "Building", 150.0, 100.0),
    ("Commonwealth Hall", "Residence", 200.0, 75.0),
    ("Volta Hall", "Residence", 120.0, 120.0),
    ("School of Medicine", "Academic", 180.0, 30.0),
    ("Engineering Building", "Academic", 90.0, 80.0),
    ("Administration Block", "Office", 110.0, 60.0),
]

UG_PATHS: list[tuple[str, str]] = [
    ("Main Gate", "Balme Library"),
    ("Balme Library", "Great Hall"),
    ("Balme Library", "Administration Block"),
    ("Great Hall", "Commonwealth Hall"),
    ("Great Hall", "Volta Hall"),
    ("Administration Block", "Engineering Building"),
    ("School of Medicine", "Commonwealth Hall"),
    ("Engineering Building", "Volta Hall"),
]
