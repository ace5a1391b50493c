from fastapi import FastAPI
from registryctl.api.routes import registry
from registryctl.api.middleware import AuthMiddleware

app = FastAPI(title="registryctl")
app.add_middleware(AuthMiddleware)

app.include_router(registry.router)
