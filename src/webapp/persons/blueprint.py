"""
Persons blueprint: list / search / sort, create, edit, delete and exports.
"""

import logging

from flask import Blueprint, render_template, request, flash, redirect, url_for, send_file, current_app
from marshmallow import ValidationError

from contacts.enums import GenderOptions, SortOrderOptions
from contacts.exceptions import InvalidArgumentError
from contacts.schemas import PersonAddRequestSchema, PersonUpdateRequestSchema
from contacts.services import PersonField
from webapp.utils.services import persons_service, countries_service

bp = Blueprint('persons', __name__, url_prefix='/persons')
logger = logging.getLogger(__name__)

# Options for the "Search By" drop-down
SEARCH_FIELD_LABELS = {
    PersonField.PERSON_NAME.value: 'Person Name',
    PersonField.EMAIL.value: 'Email',
    PersonField.DATE_OF_BIRTH.value: 'Date of Birth',
    PersonField.GENDER.value: 'Gender',
    PersonField.COUNTRY_ID.value: 'Country',
    PersonField.ADDRESS.value: 'Address',
}

# Sortable column headers, in table order
SORT_COLUMNS = [
    (PersonField.PERSON_NAME.value, 'Person Name'),
    (PersonField.EMAIL.value, 'Email'),
    (PersonField.DATE_OF_BIRTH.value, 'Date of Birth'),
    (PersonField.AGE.value, 'Age'),
    (PersonField.GENDER.value, 'Gender'),
    (PersonField.COUNTRY.value, 'Country'),
    (PersonField.ADDRESS.value, 'Address'),
    (PersonField.RECEIVE_NEWS_LETTERS.value, 'Receive News Letters'),
]

XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def _form_data():
    """Submitted form fields; an unchecked checkbox is simply absent."""
    data = request.form.to_dict()
    data['receive_news_letters'] = 'receive_news_letters' in request.form
    return data


def _form_from_response(person):
    return {
        'person_id': str(person.person_id),
        'person_name': person.person_name or '',
        'email': person.email or '',
        'date_of_birth': person.date_of_birth.isoformat() if person.date_of_birth else '',
        'gender': person.gender or '',
        'country_id': str(person.country_id) if person.country_id else '',
        'address': person.address or '',
        'receive_news_letters': person.receive_news_letters,
        'tin': person.tin or '',
    }


def _render_form(template, form, errors=None, status=200, **context):
    return render_template(
        template,
        form=form,
        errors=errors or {},
        countries=countries_service().get_all_countries(),
        genders=[g.value for g in GenderOptions],
        **context
    ), status


@bp.route('/index')
def index():
    """
    Persons list with optional search and sort.

    Query params:
        searchBy, searchString: field tag and text to filter on
        sortBy, sortOrder: field tag and ASC / DESC (default PersonName ASC)
    """
    search_by = request.args.get('searchBy', '')
    search_string = request.args.get('searchString', '')
    sort_by = request.args.get('sortBy', PersonField.PERSON_NAME.value)
    sort_order = SortOrderOptions.parse(request.args.get('sortOrder'))

    service = persons_service()
    persons = service.get_filtered_persons(search_by, search_string)
    persons = service.get_sorted_persons(persons, sort_by, sort_order)

    return render_template(
        'persons/index.html',
        persons=persons,
        search_fields=SEARCH_FIELD_LABELS,
        sort_columns=SORT_COLUMNS,
        current_search_by=search_by,
        current_search_string=search_string,
        current_sort_by=sort_by,
        current_sort_order=sort_order.value,
    )


@bp.route('/create', methods=['GET', 'POST'])
def create():
    if request.method == 'GET':
        return _render_form('persons/create.html', form={})

    form = _form_data()
    try:
        add_request = PersonAddRequestSchema().load(form)
        person = persons_service().add_person(add_request)
    except ValidationError as err:
        return _render_form('persons/create.html', form=form, errors=err.messages, status=400)
    except InvalidArgumentError as e:
        return _render_form('persons/create.html', form=form, errors=e.errors, status=400)

    flash(f'Person "{person.person_name}" created.', 'success')
    return redirect(url_for('persons.index'))


@bp.route('/edit/<uuid:person_id>', methods=['GET', 'POST'])
def edit(person_id):
    service = persons_service()
    person = service.get_person_by_person_id(person_id)
    if person is None:
        flash('Person not found.', 'warning')
        return redirect(url_for('persons.index'))

    if request.method == 'GET':
        return _render_form('persons/edit.html', form=_form_from_response(person), person=person)

    form = _form_data()
    form['person_id'] = str(person_id)
    try:
        update_request = PersonUpdateRequestSchema().load(form)
        updated = service.update_person(update_request)
    except ValidationError as err:
        return _render_form('persons/edit.html', form=form, errors=err.messages, status=400, person=person)
    except InvalidArgumentError as e:
        return _render_form('persons/edit.html', form=form, errors=e.errors, status=400, person=person)

    flash(f'Person "{updated.person_name}" updated.', 'success')
    return redirect(url_for('persons.index'))


@bp.route('/delete/<uuid:person_id>', methods=['GET', 'POST'])
def delete(person_id):
    service = persons_service()
    person = service.get_person_by_person_id(person_id)
    if person is None:
        flash('Person not found.', 'warning')
        return redirect(url_for('persons.index'))

    if request.method == 'GET':
        return render_template('persons/delete.html', person=person)

    if service.delete_person(person_id):
        flash(f'Person "{person.person_name}" deleted.', 'success')
    return redirect(url_for('persons.index'))


@bp.route('/persons-csv')
def persons_csv():
    buffer = persons_service().get_persons_csv()
    return send_file(buffer, mimetype='text/csv', as_attachment=True, download_name='persons.csv')


@bp.route('/persons-excel')
def persons_excel():
    brief = current_app.config.get('EXCEL_EXPORT_BRIEF', False)
    buffer = persons_service().get_persons_excel(brief=brief)
    return send_file(buffer, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name='persons.xlsx')
