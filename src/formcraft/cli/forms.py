"""Form store commands."""
import click

from formcraft.error import FormcraftException
from formcraft.form import FieldType, RespondentFlow, export_csv, response_table
from formcraft.form.exceptions import InvalidFieldError

LIST_FIELD_TYPES = (FieldType.CHECKBOX, FieldType.FILE)


def _fail(error: FormcraftException):
    raise click.ClickException(error.message)


@click.command("forms")
@click.pass_obj
def list_forms(store):
    """List the forms with their status and response count."""
    for form in store.list_forms():
        count = len(store.list_responses(form.id))
        click.echo(f"{form.id}\t{form.status:<8}\t{count} response(s)\t{form.title}")


@click.command("stats")
@click.pass_obj
def show_stats(store):
    """Dashboard statistics."""
    stats = store.stats
    click.echo(f"Total forms:     {stats.total_forms}")
    click.echo(f"Active forms:    {stats.active_forms}")
    click.echo(f"Inactive forms:  {stats.inactive_forms}")
    click.echo(f"Total responses: {stats.total_responses}")


@click.command("show")
@click.argument("form_id")
@click.pass_obj
def show_form(store, form_id):
    """Show the fields of a form, page by page."""
    try:
        form = store.fetch_form(form_id)
    except FormcraftException as e:
        _fail(e)

    click.echo(f"{form.title} [{form.status}]")
    if form.description:
        click.echo(form.description)

    for page in range(1, form.total_pages + 1):
        click.echo(f"-- Page {page} of {form.total_pages}")
        for field in form.fields_on_page(page):
            marker = "*" if field.required else " "
            click.echo(f"  {marker} {field.id}\t{field.type:<10}\t{field.label}")


@click.command("toggle")
@click.argument("form_id")
@click.pass_obj
def toggle_form(store, form_id):
    """Flip a form between active and inactive."""
    try:
        form = store.toggle_form_status(form_id)
    except FormcraftException as e:
        _fail(e)

    click.echo(f"{form.title} is now {form.status}")


@click.command("export")
@click.argument("form_id")
@click.option("-o", "--output", type=click.Path(dir_okay=False, writable=True), default=None,
              help="Write the CSV to this file instead of stdout.")
@click.pass_obj
def export_responses(store, form_id, output):
    """Export the responses of a form as CSV."""
    try:
        filename, content = export_csv(store, form_id)
    except FormcraftException as e:
        _fail(e)

    if output is None:
        click.echo(content, nl=False)
        return

    with open(output, "w", newline="") as f:
        f.write(content)

    click.echo(f"Exported {filename} to {output}", err=True)


def _prompt_value(field):
    label = field.label
    if field.options:
        label += " (" + "/".join(field.option_values()) + ")"

    if field.type in LIST_FIELD_TYPES:
        label += " [comma separated]"

    value = click.prompt(label, default="", show_default=False)
    if field.type in LIST_FIELD_TYPES:
        return [item.strip() for item in value.split(",") if item.strip()]

    return value


@click.command("fill")
@click.argument("form_id")
@click.pass_obj
def fill_form(store, form_id):
    """Fill out a published form interactively."""
    try:
        flow = RespondentFlow.open(store, form_id)
    except FormcraftException as e:
        _fail(e)

    click.echo(flow.form.title)
    while not flow.is_submitted:
        click.echo(f"-- Page {flow.current_page} of {flow.total_pages} ({flow.progress:.0f}% complete)")
        pending = [field for field in flow.current_fields if not flow.errors or field.id in flow.errors]
        for field in pending:
            while True:
                try:
                    flow.set_answer(field.id, _prompt_value(field))
                    break
                except InvalidFieldError as e:
                    click.echo(f"  ! {e.message}", err=True)

        if flow.next():
            continue

        if flow.failure:
            raise click.ClickException(flow.failure)

        for message in flow.errors.values():
            click.echo(f"  ! {message}", err=True)

    click.echo(flow.thank_you_message)
    headers, rows = response_table(store, form_id)
    click.echo(f"{len(rows)} response(s) recorded for this form.")


COMMANDS = (list_forms, show_stats, show_form, toggle_form, export_responses, fill_form)
