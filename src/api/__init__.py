"""HTTP API layer of the signup service.

- **main**: Application factory and lifecycle management
- **routes**: ``POST /api/signup``
- **controllers**: The signup controller, independent of FastAPI
- **factories**: Wiring of the controller to its adapters
- **middleware**: Request context and global exception handlers
- **schemas**: Request/response envelopes and JSON models
- **utils**: Status code helpers and JSON rendering
"""
