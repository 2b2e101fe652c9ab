"""ViewModel package for form state and table state.

Call context:
    ``sellerdesk/app`` controllers import concrete view models from this
    package to move values between entities and Tk views.

Dependencies:
    Modules here depend on domain entities and errors only. Services, dialogs
    and alerts stay outside.

Responsibilities:
    - Hold raw form values in explicit state records.
    - Map entities to form state and back, collecting field errors.
    - Provide keystroke constraints and text formatting for the views.
"""
