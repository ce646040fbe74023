"""HTML rendering for the task list and the create/edit form."""

from html import escape
from typing import Optional

from tasktracker.models.status import TaskStatus
from tasktracker.schemas.task import TaskOut


def render_page(title: str, body: str) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{escape(title)}</title>
</head>
<body>
  <nav><a href="/">Tasks</a> | <a href="/task/new">New task</a></nav>
  <main>
{body}
  </main>
</body>
</html>
"""


def render_task_item(task: TaskOut) -> str:
    return f"""    <div class="task" id="task-{task.id}">
      <h2>{escape(task.title)}</h2>
      <p>{escape(task.description)}</p>
      <p>Status: {escape(task.status.value)}</p>
      <a href="/task/{task.id}/edit">Edit</a>
      <form method="post" action="/task/{task.id}/delete">
        <button type="submit">Delete</button>
      </form>
    </div>"""


def render_task_list(tasks: list[TaskOut]) -> str:
    if tasks:
        items = "\n".join(render_task_item(task) for task in tasks)
    else:
        items = '    <p class="empty">No tasks yet.</p>'
    return render_page("Task List", f"    <h1>Task List</h1>\n    <div>\n{items}\n    </div>")


def render_list_error() -> str:
    body = """    <h1>Task List</h1>
    <p class="error">Could not load tasks. Try again later.</p>"""
    return render_page("Task List", body)


def render_not_found(message: str = "Task not found") -> str:
    return render_page("Not found", f'    <p class="error">{escape(message)}</p>')


def render_task_form(
    task_id: Optional[int] = None,
    title: str = "",
    description: str = "",
    status: str = TaskStatus.PENDING.value,
    notice: Optional[str] = None,
    error: Optional[str] = None,
) -> str:
    """Create form when task_id is None, edit form otherwise."""
    editing = task_id is not None
    action = f"/task/{task_id}/edit" if editing else "/task/new"
    heading = "Edit Task" if editing else "New Task"
    button = "Update Task" if editing else "Create Task"
    options = "\n".join(
        '          <option value="{value}"{selected}>{label}</option>'.format(
            value=s.value,
            selected=" selected" if s.value == status else "",
            label=s.label,
        )
        for s in TaskStatus
    )
    messages = ""
    if notice:
        messages += f'    <p class="notice">{escape(notice)}</p>\n'
    if error:
        messages += f'    <p class="error">{escape(error)}</p>\n'
    body = f"""    <h1>{heading}</h1>
{messages}    <form method="post" action="{action}">
      <label>
        Title:
        <input type="text" name="title" value="{escape(title)}">
      </label>
      <label>
        Description:
        <textarea name="description">{escape(description)}</textarea>
      </label>
      <label>
        Status:
        <select name="status">
{options}
        </select>
      </label>
      <button type="submit">{button}</button>
    </form>"""
    return render_page(heading, body)
