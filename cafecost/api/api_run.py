from fastapi import FastAPI
import logging

from cafecost.utilities import config

# Routers
from cafecost.api.routes import costing, overheads, simulations, tax
from dotenv import load_dotenv
load_dotenv()

# Logging
logger = logging.getLogger("cafecost_app")

# Initialize FastAPI app
app = FastAPI(title="Cafe Cost & Overhead API", debug=config.DEBUG)

# Include routers
app.include_router(costing.router)
app.include_router(overheads.router)
app.include_router(simulations.router)
app.include_router(tax.router)



@app.get("/api/health")
def health():
    return {"status": "ok"}
