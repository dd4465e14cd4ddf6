import logging

import uvicorn

from mangashelf.core.config import HOST, LOG_LEVEL, PORT


def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("mangashelf.main:app", host=HOST, port=PORT)

if __name__ == "__main__":
    main()
