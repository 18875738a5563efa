"""ViewModel package for UI state and snapshot projection.

Call context:
    ``printflow/usecases/print_files_workflow.py`` owns the file-selection and
    printer-queue view models; ``printflow/app/main.py`` owns settings.

Dependencies:
    Modules in this package depend on domain types and lightweight formatting
    helpers only. I/O adapters and use-case orchestration remain outside.

Responsibilities:
    - Own the selectable lists shown by the views.
    - Transform list state into immutable snapshots for the display port.
    - Keep MVVM boundaries explicit by avoiding filesystem or widget logic.
"""
