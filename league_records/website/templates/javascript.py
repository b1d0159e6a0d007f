"""
JavaScript code for the league record book website.
"""


def get_javascript(json_data: str) -> str:
    """
    Return the JavaScript code for the website.

    Args:
        json_data: JSON string containing the serialized career rows and cards

    Returns:
        JavaScript code as a string
    """
    js_template = """        const DATA = {JSON_DATA_PLACEHOLDER};
        const careerData = DATA.career.slice();

        // Same rules as SortState: new column sorts descending, same column flips
        const sortState = {
            key: DATA.careerSort.key || '',
            dir: DATA.careerSort.direction || -1,
        };

        function showSection(name) {
            const career = name === 'career';
            document.getElementById('career-section').hidden = !career;
            document.getElementById('records-section').hidden = career;
            const careerTab = document.getElementById('tab-career');
            const recordsTab = document.getElementById('tab-records');
            careerTab.classList.toggle('active', career);
            recordsTab.classList.toggle('active', !career);
            careerTab.setAttribute('aria-selected', career ? 'true' : 'false');
            recordsTab.setAttribute('aria-selected', career ? 'false' : 'true');
        }

        function renderCareer() {
            const tbody = document.querySelector('#career-table tbody');
            const keys = Array.from(document.querySelectorAll('#career-table th')).map(th => th.dataset.key);
            tbody.innerHTML = '';
            careerData.forEach(row => {
                const tr = document.createElement('tr');
                keys.forEach(key => {
                    const td = document.createElement('td');
                    td.textContent = row.display[key];
                    tr.appendChild(td);
                });
                tbody.appendChild(tr);
            });
        }

        function markSortedHeader() {
            document.querySelectorAll('#career-table th').forEach(th => {
                th.classList.remove('sorted-asc', 'sorted-desc');
                if (th.dataset.key === sortState.key) {
                    th.classList.add(sortState.dir > 0 ? 'sorted-asc' : 'sorted-desc');
                }
            });
        }

        function sortCareer(key, kind) {
            if (sortState.key === key) {
                sortState.dir = -sortState.dir;
            } else {
                sortState.key = key;
                sortState.dir = -1;
            }
            markSortedHeader();

            if (kind === 'text') {
                careerData.sort((a, b) => String(a[key]).localeCompare(String(b[key])) * sortState.dir);
            } else {
                careerData.sort((a, b) => {
                    const av = parseFloat(a[key]);
                    const bv = parseFloat(b[key]);
                    if (isNaN(av) || isNaN(bv)) {
                        return (isNaN(av) ? 1 : 0) - (isNaN(bv) ? 1 : 0);
                    }
                    return (av - bv) * sortState.dir;
                });
            }
            renderCareer();
        }

        function renderCards() {
            if (!DATA.recordsAvailable) {
                const notice = document.getElementById('records-unavailable');
                notice.textContent = DATA.recordsError || 'All-time records could not be loaded.';
                notice.hidden = false;
                return;
            }
            DATA.cards.forEach(card => {
                const container = document.querySelector(`#cell-${card.id} .content`);
                if (!container) return;
                container.innerHTML = '';
                if (card.error) {
                    const div = document.createElement('div');
                    div.className = 'card-error';
                    div.textContent = card.error;
                    container.appendChild(div);
                    return;
                }
                card.lines.forEach(line => {
                    const div = document.createElement('div');
                    if (line.fontSize) div.style.fontSize = line.fontSize;
                    div.textContent = line.text;
                    container.appendChild(div);
                });
            });
        }

        // Initialize
        document.getElementById('tab-career').addEventListener('click', () => showSection('career'));
        document.getElementById('tab-records').addEventListener('click', () => showSection('records'));
        document.querySelectorAll('#career-table th').forEach(th => {
            th.addEventListener('click', () => sortCareer(th.dataset.key, th.dataset.kind));
        });
        markSortedHeader();
        renderCareer();
        try { renderCards(); } catch(e) { console.error('renderCards:', e); }"""
    return js_template.replace('{JSON_DATA_PLACEHOLDER}', json_data)
