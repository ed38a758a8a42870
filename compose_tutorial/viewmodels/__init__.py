"""ViewModel package for UI state and event surfaces.

Call context:
    ``compose_tutorial/app/main.py`` builds concrete view-models from this
    package and binds each one to the render method of its Tk view.

Dependencies:
    Modules in this package depend on the domain state containers only. No
    Tk imports live here, so every unit is testable without a display.

Responsibilities:
    - Own remembered state and recompose when it changes.
    - Turn state snapshots into immutable UI models for the views.
    - Route view events back to the state owner.
"""
