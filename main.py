from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.controllers import fire_watch_controller, geocoding_controller, health_controller
from app.config import settings
from app.logging_config import setup_logging

# Structured JSON logging to stdout
setup_logging(level=settings.log_level)

app = FastAPI(
	title="Can I Burn API",
	description="Burn status and location lookup for New Brunswick, backed by NBDNR fire-watch data",
	version="1.0.0"
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=False,
	allow_methods=["GET"],
	allow_headers=["*"],
)

app.include_router(health_controller.router)
app.include_router(fire_watch_controller.router)
app.include_router(geocoding_controller.router)

@app.get("/")
async def root():
	return {
		"message": "Welcome to Can I Burn API!",
		"endpoints": {
			"health": "/api/health",
			"fire_watch": "/api/fire-watch?lat={latitude}&lng={longitude}",
			"geocode": "/api/geocode?location={location}",
			"docs": "/docs"
		}
	}


if __name__ == "__main__":
	import asyncio
	import hypercorn.asyncio
	from hypercorn.config import Config

	config = Config()
	config.bind = [f"[::]:{settings.port}"]
	asyncio.run(hypercorn.asyncio.serve(app, config))
