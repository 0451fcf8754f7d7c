"""FastAPI web application for taskboard.

Serves the browser page and the UI actions it calls. Every action validates
locally first, then forwards exactly one command to the remote REST API.
Validation failures never reach the remote API.
"""

from datetime import date
from typing import Dict, List, Optional
from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field, ValidationError

from taskboard.engine.commands import build_task_command, to_project_command
from taskboard.engine.validation import (
    apply_field_change,
    validate_assignee,
    validate_status,
    validate_task_form,
)
from taskboard.integrations.api_client import ApiClient, ApiError
from taskboard.integrations.projects_api import ProjectsApi
from taskboard.integrations.tasks_api import TasksApi
from taskboard.models.constants import ERROR_BANNER_MS, SUCCESS_BANNER_MS
from taskboard.models.project_form import CreateProjectForm, EditProjectForm
from taskboard.models.task import TaskStatus
from taskboard.models.task_factory import format_task_dates, today_utc
from taskboard.models.task_form import CreateTaskForm, EditTaskForm, TaskFormField, TaskFormState

# Initialize FastAPI app
app = FastAPI(
    title="taskboard",
    description="Projects and tasks front-end for a remote REST API",
    version="0.1.0"
)

_api_client: Optional[ApiClient] = None


def get_api_client() -> ApiClient:
    """Shared transport client (created on first use)."""
    global _api_client
    if _api_client is None:
        _api_client = ApiClient()
    return _api_client


def get_projects_api(client: ApiClient = Depends(get_api_client)) -> ProjectsApi:
    return ProjectsApi(client)


def get_tasks_api(client: ApiClient = Depends(get_api_client)) -> TasksApi:
    return TasksApi(client)


def get_today() -> date:
    return today_utc()


# Request/response models
class ActionResponse(BaseModel):
    """Banner text to show after an action (None when nothing changed)."""
    message: Optional[str] = None


class ValidateTaskRequest(BaseModel):
    """Form state to validate, optionally with the single field being edited."""
    form: TaskFormState
    field: Optional[TaskFormField] = Field(None, description="Wire name of the changed field")
    value: Optional[str] = Field(None, description="New raw value of the changed field")
    errors: Dict[str, str] = Field(default_factory=dict, description="Errors currently shown")


class StatusChangeRequest(BaseModel):
    status: Optional[str] = None


class AssignRequest(BaseModel):
    assigned_to_user_id: Optional[str] = Field(None, alias="assignedToUserId")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


def _api_failure(action: str, e: ApiError) -> HTTPException:
    """Turn a remote API error into a banner message for the page."""
    reason = e.message or f"Error desconocido al {action}."
    status_code = 404 if e.status_code == 404 else 502
    return HTTPException(status_code=status_code, detail=f"Error al {action}: {reason}")


def _field_errors(errors: Dict[str, str]) -> JSONResponse:
    return JSONResponse(status_code=422, content={"errors": errors})


@app.get("/", response_class=HTMLResponse)
async def root():
    """Browser page."""
    return (
        INDEX_HTML
        .replace("__SUCCESS_BANNER_MS__", str(SUCCESS_BANNER_MS))
        .replace("__ERROR_BANNER_MS__", str(ERROR_BANNER_MS))
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": "0.1.0"}


# Projects

@app.get("/ui/projects")
def list_projects(projects_api: ProjectsApi = Depends(get_projects_api)) -> List[dict]:
    try:
        projects = projects_api.list_projects()
    except ApiError as e:
        raise _api_failure("cargar los proyectos", e)
    return [project.model_dump(by_alias=True) for project in projects]


@app.get("/ui/projects/{project_id}")
def get_project(project_id: str, projects_api: ProjectsApi = Depends(get_projects_api)) -> dict:
    try:
        project = projects_api.get_project(project_id)
    except ApiError as e:
        raise _api_failure("cargar el proyecto", e)
    return project.model_dump(by_alias=True)


@app.post("/ui/projects", response_model=ActionResponse, status_code=201)
def create_project(form: CreateProjectForm, projects_api: ProjectsApi = Depends(get_projects_api)):
    try:
        command = to_project_command(form)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    try:
        projects_api.create_project(command)
    except ApiError as e:
        raise _api_failure("crear el proyecto", e)
    return ActionResponse(message="Proyecto creado exitosamente!")


@app.put("/ui/projects/{project_id}", response_model=ActionResponse)
def update_project(
    project_id: str,
    form: EditProjectForm,
    projects_api: ProjectsApi = Depends(get_projects_api),
):
    try:
        command = to_project_command(form.model_copy(update={"id": project_id}))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    try:
        projects_api.update_project(project_id, command)
    except ApiError as e:
        raise _api_failure("actualizar el proyecto", e)
    return ActionResponse(message="Proyecto actualizado exitosamente!")


@app.delete("/ui/projects/{project_id}", response_model=ActionResponse)
def delete_project(project_id: str, projects_api: ProjectsApi = Depends(get_projects_api)):
    try:
        projects_api.delete_project(project_id)
    except ApiError as e:
        raise _api_failure("eliminar el proyecto", e)
    return ActionResponse(message="Proyecto eliminado exitosamente!")


# Tasks

@app.get("/ui/projects/{project_id}/tasks")
def list_tasks(project_id: str, tasks_api: TasksApi = Depends(get_tasks_api)) -> List[dict]:
    try:
        tasks = tasks_api.list_tasks_by_project(project_id)
    except ApiError as e:
        raise _api_failure("cargar las tareas", e)
    return [task.model_dump(by_alias=True) for task in tasks]


@app.get("/ui/tasks/{task_id}")
def get_task(task_id: str, tasks_api: TasksApi = Depends(get_tasks_api)) -> dict:
    """Task details, dates as YYYY-MM-DD."""
    try:
        task = tasks_api.get_task(task_id)
    except ApiError as e:
        raise _api_failure("cargar la tarea", e)
    return format_task_dates(task).model_dump(by_alias=True)


@app.post("/ui/tasks/validate")
def validate_task(request: ValidateTaskRequest, today: date = Depends(get_today)):
    """Validate a task form, or apply one field edit and refresh its error."""
    if request.field is None:
        return {"form": request.form.model_dump(by_alias=True), "errors": validate_task_form(request.form, today=today)}

    form, errors = apply_field_change(request.form, request.field, request.value, request.errors, today=today)
    return {"form": form.model_dump(by_alias=True), "errors": errors}


@app.post("/ui/projects/{project_id}/tasks", response_model=ActionResponse, status_code=201)
def create_task(
    project_id: str,
    form: CreateTaskForm,
    tasks_api: TasksApi = Depends(get_tasks_api),
    today: date = Depends(get_today),
):
    # The project in the URL wins over whatever the form carried
    command, errors = build_task_command(form.model_copy(update={"project_id": project_id}), today=today)
    if errors:
        return _field_errors(errors)
    try:
        tasks_api.create_task(command)
    except ApiError as e:
        raise _api_failure("crear la tarea", e)
    return ActionResponse(message="Tarea creada exitosamente!")


@app.put("/ui/tasks/{task_id}", response_model=ActionResponse)
def update_task(
    task_id: str,
    form: EditTaskForm,
    tasks_api: TasksApi = Depends(get_tasks_api),
    today: date = Depends(get_today),
):
    command, errors = build_task_command(form.model_copy(update={"id": task_id}), today=today)
    if errors:
        return _field_errors(errors)
    try:
        tasks_api.update_task(task_id, command)
    except ApiError as e:
        raise _api_failure("actualizar la tarea", e)
    return ActionResponse(message="Tarea actualizada exitosamente!")


@app.post("/ui/tasks/{task_id}/status", response_model=ActionResponse)
def change_task_status(
    task_id: str,
    request: StatusChangeRequest,
    tasks_api: TasksApi = Depends(get_tasks_api),
):
    error = validate_status(request.status)
    if error:
        return _field_errors({"status": error})
    try:
        task = tasks_api.get_task(task_id)
        if task.status == request.status:
            return ActionResponse(message=None)
        tasks_api.change_task_status(format_task_dates(task), TaskStatus(request.status))
    except ApiError as e:
        raise _api_failure("cambiar el estado de la tarea", e)
    return ActionResponse(message=f'Estado de la tarea "{task.title}" actualizado a "{request.status}"!')


@app.post("/ui/tasks/{task_id}/assignee", response_model=ActionResponse)
def assign_task(
    task_id: str,
    request: AssignRequest,
    tasks_api: TasksApi = Depends(get_tasks_api),
):
    user_id = request.assigned_to_user_id or None
    error = validate_assignee(user_id)
    if error:
        return _field_errors({"assignedToUserId": error})
    try:
        task = tasks_api.get_task(task_id)
        tasks_api.assign_task(format_task_dates(task), user_id)
    except ApiError as e:
        raise _api_failure("asignar la tarea", e)
    if user_id is None:
        return ActionResponse(message="Tarea desasignada exitosamente!")
    return ActionResponse(message="Tarea asignada exitosamente!")


@app.delete("/ui/tasks/{task_id}", response_model=ActionResponse)
def delete_task(task_id: str, tasks_api: TasksApi = Depends(get_tasks_api)):
    try:
        tasks_api.delete_task(task_id)
    except ApiError as e:
        raise _api_failure("eliminar la tarea", e)
    return ActionResponse(message="Tarea eliminada exitosamente!")


INDEX_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>taskboard</title>
    <meta charset="utf-8">
    <style>
        body { font-family: Arial, sans-serif; max-width: 960px; margin: 40px auto; padding: 20px; }
        button { padding: 6px 14px; margin: 2px; cursor: pointer; }
        .section { margin: 20px 0; padding: 15px; border: 1px solid #ddd; border-radius: 5px; }
        .banner { padding: 10px; margin: 10px 0; border-radius: 4px; display: none; }
        .banner.success { background: #d1e7dd; display: block; }
        .banner.error { background: #f8d7da; display: block; }
        .field-error { color: #b02a37; font-size: 0.9em; min-height: 1em; }
        table { width: 100%; border-collapse: collapse; margin-top: 10px; }
        th, td { padding: 8px; text-align: left; border-bottom: 1px solid #ddd; }
        th { background-color: #f2f2f2; }
        label { display: block; margin-top: 8px; }
        .hidden { display: none; }
    </style>
</head>
<body>
    <h1>taskboard</h1>
    <div id="success-banner" class="banner"></div>
    <div id="error-banner" class="banner"></div>

    <div class="section">
        <h2>Proyectos</h2>
        <div id="projects">Cargando proyectos...</div>
        <h3 id="project-form-title">Nuevo proyecto</h3>
        <form id="project-form">
            <input type="hidden" name="projectId">
            <input type="hidden" name="projectStatus">
            <label>Nombre <input name="name" required></label>
            <label>Descripción <textarea name="description"></textarea></label>
            <label>Fecha de inicio <input type="date" name="startDate" required></label>
            <label>Fecha de fin <input type="date" name="endDate"></label>
            <button type="submit">Guardar</button>
            <button type="button" onclick="resetProjectForm()">Cancelar</button>
        </form>
    </div>

    <div id="project-details" class="section hidden">
        <h2 id="project-name"></h2>
        <p><strong>Descripción:</strong> <span id="project-description"></span></p>
        <p id="project-dates"></p>
        <h3>Tareas del proyecto</h3>
        <div id="tasks"></div>
        <div id="task-details" class="section hidden"></div>
        <h3 id="task-form-title">Nueva tarea</h3>
        <form id="task-form" novalidate>
            <label>Título <input name="title"></label>
            <div class="field-error" data-for="title"></div>
            <label>Descripción <textarea name="description" maxlength="500"></textarea></label>
            <div class="field-error" data-for="description"></div>
            <label>Fecha de vencimiento <input type="date" name="dueDate"></label>
            <div class="field-error" data-for="dueDate"></div>
            <label>Usuario asignado <input name="assignedToUserId"></label>
            <div class="field-error" data-for="assignedToUserId"></div>
            <div id="edit-only" class="hidden">
                <label>Estado <select name="status">
                    <option>Pending</option><option>InProgress</option>
                    <option>Completed</option><option>Canceled</option>
                </select></label>
                <div class="field-error" data-for="status"></div>
                <label>Prioridad <select name="priority">
                    <option>Low</option><option>Medium</option><option>High</option>
                </select></label>
                <div class="field-error" data-for="priority"></div>
                <label>Fecha de finalización <input type="date" name="completionDate"></label>
            </div>
            <button type="submit">Guardar</button>
            <button type="button" onclick="resetTaskForm()">Cancelar</button>
        </form>
    </div>

    <script>
        const STATUSES = ['Pending', 'InProgress', 'Completed', 'Canceled'];
        const bannerTimers = {};
        let currentProject = null;
        let taskForm = null;
        let taskErrors = {};
        let tasksGeneration = 0;

        function dayOf(value) { return (value || '').split('T')[0]; }

        function esc(text) {
            const div = document.createElement('div');
            div.textContent = text == null ? '' : String(text);
            return div.innerHTML;
        }

        // Each banner owns one timer; a newer message replaces the pending one.
        function showBanner(kind, text) {
            const el = document.getElementById(kind + '-banner');
            clearTimeout(bannerTimers[kind]);
            if (!text) { el.className = 'banner'; el.textContent = ''; return; }
            el.textContent = text;
            el.className = 'banner ' + kind;
            const ttl = kind === 'success' ? __SUCCESS_BANNER_MS__ : __ERROR_BANNER_MS__;
            bannerTimers[kind] = setTimeout(() => showBanner(kind, null), ttl);
        }

        function clearBanners() { showBanner('success', null); showBanner('error', null); }

        async function call(method, url, body) {
            const options = { method, headers: { 'Content-Type': 'application/json' } };
            if (body !== undefined) options.body = JSON.stringify(body);
            const response = await fetch(url, options);
            const data = await response.json().catch(() => null);
            return { ok: response.ok, status: response.status, data };
        }

        function failureText(result) {
            return (result.data && typeof result.data.detail === 'string') ? result.data.detail : 'Error desconocido.';
        }

        async function runAction(method, url, body) {
            clearBanners();
            const result = await call(method, url, body);
            if (result.status === 422 && result.data && result.data.errors) {
                return result;
            }
            if (!result.ok) { showBanner('error', failureText(result)); return result; }
            if (result.data && result.data.message) showBanner('success', result.data.message);
            return result;
        }

        async function loadProjects() {
            const el = document.getElementById('projects');
            const result = await call('GET', '/ui/projects');
            if (!result.ok) { el.textContent = failureText(result); return; }
            if (result.data.length === 0) { el.innerHTML = '<p>No hay proyectos.</p>'; return; }
            let html = '<table><tr><th>Nombre</th><th>Estado</th><th>Inicio</th><th></th></tr>';
            result.data.forEach(p => {
                html += `<tr><td>${esc(p.name)}</td><td>${esc(p.status)}</td><td>${esc((p.startDate || '').split('T')[0])}</td>
                    <td><button onclick="openProject('${esc(p.id)}')">Ver</button>
                    <button onclick='editProject(${JSON.stringify(p).replace(/'/g, "&#39;")})'>Editar</button>
                    <button onclick="deleteProject('${esc(p.id)}', '${esc(p.name)}')">Eliminar</button></td></tr>`;
            });
            el.innerHTML = html + '</table>';
        }

        function resetProjectForm() {
            const form = document.getElementById('project-form');
            form.reset();
            form.elements.startDate.value = new Date().toISOString().split('T')[0];
            document.getElementById('project-form-title').textContent = 'Nuevo proyecto';
        }

        function editProject(p) {
            const form = document.getElementById('project-form');
            const el = form.elements;
            el.projectId.value = p.id; el.projectStatus.value = p.status;
            el['name'].value = p.name; el.description.value = p.description || '';
            el.startDate.value = (p.startDate || '').split('T')[0];
            el.endDate.value = (p.endDate || '').split('T')[0];
            document.getElementById('project-form-title').textContent = 'Editar proyecto';
        }

        document.getElementById('project-form').addEventListener('submit', async (e) => {
            e.preventDefault();
            const f = e.target.elements;
            const body = { name: f['name'].value, description: f.description.value,
                           startDate: f.startDate.value, endDate: f.endDate.value };
            const result = f.projectId.value
                ? await runAction('PUT', '/ui/projects/' + f.projectId.value, { ...body, mode: 'edit', status: f.projectStatus.value })
                : await runAction('POST', '/ui/projects', { ...body, mode: 'create' });
            if (result.ok) { resetProjectForm(); loadProjects(); }
        });

        async function deleteProject(id, name) {
            if (!confirm(`¿Estás seguro de que quieres eliminar el proyecto "${name}"? Esta acción no se puede deshacer.`)) return;
            const result = await runAction('DELETE', '/ui/projects/' + id);
            if (result.ok) {
                if (currentProject && currentProject.id === id) {
                    currentProject = null;
                    document.getElementById('project-details').classList.add('hidden');
                }
                loadProjects();
            }
        }

        async function openProject(id) {
            const result = await call('GET', '/ui/projects/' + id);
            if (!result.ok) { showBanner('error', failureText(result)); return; }
            currentProject = result.data;
            document.getElementById('project-name').textContent = `${currentProject.name} (${currentProject.status})`;
            document.getElementById('project-description').textContent = currentProject.description || 'N/A';
            const dates = 'Fecha de inicio: ' + dayOf(currentProject.startDate)
                + (currentProject.endDate ? ' | Fecha de fin: ' + dayOf(currentProject.endDate) : '');
            document.getElementById('project-dates').textContent = dates;
            document.getElementById('task-details').classList.add('hidden');
            document.getElementById('project-details').classList.remove('hidden');
            resetTaskForm();
            loadTasks();
        }

        // Only the newest task-list request may update the table.
        async function loadTasks() {
            const generation = ++tasksGeneration;
            const el = document.getElementById('tasks');
            el.textContent = 'Cargando tareas...';
            const result = await call('GET', `/ui/projects/${currentProject.id}/tasks`);
            if (generation !== tasksGeneration) return;
            if (!result.ok) { el.textContent = failureText(result); return; }
            if (result.data.length === 0) { el.innerHTML = '<p>No hay tareas para este proyecto.</p>'; return; }
            let html = '<table><tr><th>Título</th><th>Vence</th><th>Prioridad</th><th>Estado</th><th></th></tr>';
            result.data.forEach(t => {
                const options = STATUSES.map(s => `<option ${s === t.status ? 'selected' : ''}>${s}</option>`).join('');
                html += `<tr><td>${esc(t.title)}</td><td>${esc((t.dueDate || '').split('T')[0])}</td><td>${esc(t.priority)}</td>
                    <td><select onchange="changeStatus('${esc(t.id)}', this.value)">${options}</select></td>
                    <td><button onclick="showTask('${esc(t.id)}')">Ver</button>
                    <button onclick='editTask(${JSON.stringify(t).replace(/'/g, "&#39;")})'>Editar</button>
                    <button onclick="deleteTask('${esc(t.id)}', '${esc(t.title)}')">Eliminar</button></td></tr>`;
            });
            el.innerHTML = html + '</table>';
        }

        function hideTaskDetails() { document.getElementById('task-details').classList.add('hidden'); }

        async function showTask(id) {
            const result = await call('GET', '/ui/tasks/' + id);
            if (!result.ok) { showBanner('error', failureText(result)); return; }
            const t = result.data;
            const rows = [
                ['Proyecto', t.projectName], ['Título', t.title], ['Descripción', t.description || 'N/A'],
                ['Fecha de vencimiento', t.dueDate], ['Estado', t.status], ['Prioridad', t.priority],
                ['Asignada a', t.assignedToUserName || 'N/A'],
            ];
            if (t.completionDate) rows.push(['Fecha de completado', t.completionDate]);
            rows.push(['Fecha de creación', dayOf(t.creationDate)]);
            if (t.lastModifiedDate) rows.push(['Última modificación', dayOf(t.lastModifiedDate)]);
            const el = document.getElementById('task-details');
            el.innerHTML = `<h3>Detalles de la tarea: "${esc(t.title)}"</h3>`
                + rows.map(([label, value]) => `<p><strong>${label}:</strong> ${esc(value)}</p>`).join('')
                + '<button onclick="hideTaskDetails()">Cerrar</button>';
            el.classList.remove('hidden');
        }

        function renderTaskForm() {
            const f = document.getElementById('task-form').elements;
            ['title', 'description', 'dueDate', 'assignedToUserId', 'status', 'priority', 'completionDate'].forEach(name => {
                if (f[name]) f[name].value = taskForm[name] || '';
            });
            document.getElementById('edit-only').classList.toggle('hidden', taskForm.mode !== 'edit');
            document.getElementById('task-form-title').textContent = taskForm.mode === 'edit' ? 'Editar tarea' : 'Nueva tarea';
            renderTaskErrors();
        }

        function renderTaskErrors() {
            document.querySelectorAll('#task-form .field-error').forEach(el => {
                el.textContent = taskErrors[el.dataset.for] || '';
            });
        }

        function resetTaskForm() {
            taskForm = { mode: 'create', projectId: currentProject ? currentProject.id : null,
                         title: '', description: null, assignedToUserId: null,
                         dueDate: new Date().toISOString().split('T')[0] };
            taskErrors = {};
            renderTaskForm();
        }

        function editTask(t) {
            taskForm = { mode: 'edit', id: t.id, projectId: t.projectId, title: t.title,
                         description: t.description, assignedToUserId: t.assignedToUserId,
                         dueDate: (t.dueDate || '').split('T')[0], status: t.status, priority: t.priority,
                         completionDate: t.completionDate ? t.completionDate.split('T')[0] : null };
            taskErrors = {};
            renderTaskForm();
        }

        document.querySelectorAll('#task-form input, #task-form textarea, #task-form select').forEach(input => {
            input.addEventListener('change', async () => {
                const result = await call('POST', '/ui/tasks/validate',
                    { form: taskForm, field: input.name, value: input.value, errors: taskErrors });
                if (!result.ok) return;
                taskForm = result.data.form;
                taskErrors = result.data.errors;
                renderTaskErrors();
            });
        });

        document.getElementById('task-form').addEventListener('submit', async (e) => {
            e.preventDefault();
            const f = e.target.elements;
            ['title', 'description', 'dueDate', 'assignedToUserId', 'status', 'priority', 'completionDate'].forEach(name => {
                if (taskForm.mode === 'edit' || !['status', 'priority', 'completionDate'].includes(name)) {
                    taskForm[name] = f[name].value === '' ? null : f[name].value;
                }
            });
            const result = taskForm.mode === 'edit'
                ? await runAction('PUT', '/ui/tasks/' + taskForm.id, taskForm)
                : await runAction('POST', `/ui/projects/${currentProject.id}/tasks`, taskForm);
            if (result.status === 422 && result.data && result.data.errors) {
                taskErrors = result.data.errors;
                renderTaskErrors();
                // Identifier errors have no input to sit under
                if (taskErrors.projectId || taskErrors.id) showBanner('error', taskErrors.projectId || taskErrors.id);
                return;
            }
            if (result.ok) { resetTaskForm(); loadTasks(); }
        });

        async function changeStatus(id, status) {
            const result = await runAction('POST', `/ui/tasks/${id}/status`, { status });
            if (result.status === 422) showBanner('error', result.data.errors.status);
            loadTasks();
        }

        async function deleteTask(id, title) {
            if (!confirm(`¿Estás seguro de que quieres eliminar la tarea "${title}"?`)) return;
            const result = await runAction('DELETE', '/ui/tasks/' + id);
            if (result.ok) loadTasks();
        }

        resetProjectForm();
        loadProjects();
    </script>
</body>
</html>
"""


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
