"""Run the API server: ``python -m ats_kanban``."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run("ats_kanban.main:app", host="0.0.0.0", port=3010)
