"""
API Endpoints Package

Available Endpoints:
- system: Health checks and caller identity
- catalog: Categories, lenses and camera bodies
- prompt_builder: Compose, parse, select, disabled-options and reconcile
- prompts: Saved prompt CRUD
- scene_presets: Scene preset CRUD
- generation: Image generation proxy
- review: Prompt review proxy
"""
