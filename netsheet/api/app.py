"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from netsheet.api.routes import market, net_sheet, states

app = FastAPI(
    title="Closing Cost Net Sheet",
    description="Mortgage payment, closing cost and ownership cost calculator",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(net_sheet.router)
app.include_router(states.router)
app.include_router(market.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
