from salon.domain.entities import Employee
from salon.repositories.collection_repo import CollectionRepository
from salon.utils.values import as_id_list


class EmployeeRepository(CollectionRepository[Employee]):
    """Repository for the staff roster.

    ``appointment_ids`` is maintained manually; booking never writes to it.
    """

    collection_name = "employees"
    entity_class = Employee

    def assign_appointment(self, employee_id: str, appointment_id: str) -> None:
        """Append an appointment id to the employee's list via partial update."""
        employee = self.get_by_id(employee_id)
        if employee is None:
            return
        current = as_id_list(employee.appointment_ids)
        if appointment_id in current:
            return
        self.update(employee_id, appointment_ids=[*current, appointment_id])
