from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])

# The task list lives only in the page; nothing is sent to the API.
TASK_FORM_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Tasks</title>
</head>
<body>
  <h1>Tasks</h1>
  <input id="task-input" type="text" placeholder="New task">
  <button id="add-task" type="button">Add</button>
  <ul id="task-list"></ul>
  <script>
    const input = document.getElementById("task-input");
    const list = document.getElementById("task-list");
    document.getElementById("add-task").addEventListener("click", () => {
      if (input.value.trim() !== "") {
        const li = document.createElement("li");
        li.textContent = input.value;
        list.appendChild(li);
        input.value = "";
      }
    });
  </script>
</body>
</html>
"""


# PUBLIC_INTERFACE
@router.get("/", response_class=HTMLResponse, summary="Task Input Form", include_in_schema=False)
def task_form() -> HTMLResponse:
    """Serve the task input form page."""
    return HTMLResponse(content=TASK_FORM_HTML)
