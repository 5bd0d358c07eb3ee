from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dietpal.routers import auth, recipes, profile, assistant

app = FastAPI(title="DietPal API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, replace with your specific domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(recipes.router)
app.include_router(profile.router)
app.include_router(assistant.router)


@app.get("/")
def read_root():
    return {"message": "Welcome to DietPal"}
