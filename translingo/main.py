import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from translingo.api.endpoints import languages
from translingo.api.endpoints import translation
from translingo.core.errors import GatewayError

load_dotenv()  # 确保 .env 被自动加载

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Azure Translator API",
    description=(
        "API to translate text and fetch supported languages "
        "using Microsoft Azure Translator"
    ),
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# 语言列表
app.include_router(languages.router, tags=["languages"])

# 文段翻译
app.include_router(translation.router, tags=["translate"])


def run(host: str, port: int):
    logger.info(f"Server running at http://{host}:{port}")
    logger.info(f"API docs available at http://{host}:{port}/docs")
    uvicorn.run(app, host=host, port=port, log_level="info")
