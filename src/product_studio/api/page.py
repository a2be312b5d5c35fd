"""Browser page for the product studio."""

STUDIO_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Product Studio</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0;
             background: #111827; color: #f3f4f6; }
      main { max-width: 72rem; margin: 0 auto; padding: 2rem 1rem; }
      h1 { margin: 0 0 0.25rem; }
      .muted { color: #9ca3af; }
      .hidden { display: none !important; }
      #dropzone { border: 2px dashed #4b5563; border-radius: 1rem; padding: 3rem;
                  text-align: center; cursor: pointer; margin-top: 2rem; }
      #dropzone.dragging { border-color: #a855f7; background: rgba(88, 28, 135, 0.2); }
      .cards { display: flex; flex-wrap: wrap; gap: 1rem; margin-top: 2rem; }
      .card { flex: 1 1 20rem; background: #1f2937; border-radius: 0.75rem;
              padding: 1rem; text-align: center; min-height: 300px; }
      .card img { max-width: 100%; max-height: 60vh; object-fit: contain; }
      .actions { display: flex; flex-wrap: wrap; gap: 1rem; justify-content: center;
                 align-items: center; margin-top: 2rem; }
      button { padding: 0.6rem 1.4rem; border: 0; border-radius: 0.5rem;
               color: white; font-weight: 600; cursor: pointer; background: #374151; }
      button.primary { background: #7c3aed; }
      button.download { background: #0d9488; }
      button:disabled { opacity: 0.5; cursor: not-allowed; }
      #spinner { text-align: center; margin-top: 3rem; }
      #error { margin-top: 1.5rem; padding: 1rem; border: 1px solid #dc2626;
               background: rgba(127, 29, 29, 0.5); border-radius: 0.5rem;
               text-align: center; }
      select, input[type=range] { vertical-align: middle; }
    </style>
  </head>
  <body>
    <main>
      <h1>Product Studio</h1>
      <p class="muted">Turn a product snapshot into a clean studio photograph.</p>

      <div id="dropzone">
        <input id="file" type="file" accept="image/*" class="hidden" />
        <p><strong>Drag &amp; drop your photo here</strong></p>
        <p class="muted">or</p>
        <button type="button" class="primary">Browse Files</button>
      </div>

      <div id="spinner" class="hidden">
        <p><strong id="spinner-title">Professionalizing your image...</strong></p>
        <p class="muted" id="spinner-detail">
          The AI is removing the background and enhancing quality. Please wait.
        </p>
      </div>

      <section id="comparator" class="hidden">
        <div class="cards">
          <div class="card"><h3>Before</h3><img id="before" alt="Before" /></div>
          <div class="card">
            <h3>After</h3>
            <img id="after" alt="After" class="hidden" />
            <p id="after-placeholder" class="muted">
              Your professional image will appear here.
            </p>
          </div>
        </div>
        <div class="actions">
          <button id="enhance" class="primary">Professionalize</button>
          <span id="export" class="hidden">
            <label>Format
              <select id="format">
                <option value="png">PNG</option>
                <option value="jpeg">JPEG</option>
              </select>
            </label>
            <label id="quality-row" class="hidden">Quality
              <input id="quality" type="range" min="1" max="100" value="92" />
              <span id="quality-value">92</span>
            </label>
            <button id="download" class="download">Download</button>
          </span>
          <button id="reset">Start Over</button>
        </div>
      </section>

      <div id="error" class="hidden">
        <p><strong>An Error Occurred</strong></p>
        <p id="error-message"></p>
        <button id="retry" class="primary">Try Again</button>
      </div>
    </main>
    <script>
      const $ = (id) => document.getElementById(id);

      function render(state) {
        const phase = state.phase;
        const hasOriginal = Boolean(state.original_image);
        $('spinner').classList.toggle('hidden', phase !== 'processing');
        $('dropzone').classList.toggle(
          'hidden', phase === 'processing' || hasOriginal
        );
        $('comparator').classList.toggle(
          'hidden', phase === 'processing' || !hasOriginal
        );
        if (hasOriginal) {
          $('before').src = state.original_image;
        }
        const hasResult = Boolean(state.enhanced_image);
        $('after').classList.toggle('hidden', !hasResult);
        $('after-placeholder').classList.toggle('hidden', hasResult);
        if (hasResult) {
          $('after').src = state.enhanced_image;
        }
        $('enhance').classList.toggle('hidden', hasResult || phase === 'error');
        $('export').classList.toggle('hidden', !hasResult);
        $('error').classList.toggle('hidden', phase !== 'error');
        $('error-message').textContent = state.error_message || '';
      }

      const POLL_INTERVAL_MS = 1500;
      let pollTimer = null;

      async function call(method, path, body) {
        clearTimeout(pollTimer);
        pollTimer = null;
        const res = await fetch(path, { method, body, credentials: 'same-origin' });
        if (!res.ok) {
          render({ phase: 'error', error_message: 'Request failed: ' + res.status });
          return;
        }
        const state = await res.json();
        render(state);
        // Another tab or an earlier page load may own the in-flight request.
        if (state.phase === 'processing' && pollTimer === null) {
          pollTimer = setTimeout(() => call('GET', '/api/session'), POLL_INTERVAL_MS);
        }
      }

      function upload(file) {
        if (!file) return;
        const form = new FormData();
        form.append('file', file);
        render({ phase: 'processing' });
        call('POST', '/api/session/image', form);
      }

      const dropzone = $('dropzone');
      dropzone.addEventListener('click', () => $('file').click());
      $('file').addEventListener('change', (e) => upload(e.target.files[0]));
      ['dragenter', 'dragover'].forEach((name) =>
        dropzone.addEventListener(name, (e) => {
          e.preventDefault();
          dropzone.classList.add('dragging');
        })
      );
      dropzone.addEventListener('dragleave', (e) => {
        e.preventDefault();
        dropzone.classList.remove('dragging');
      });
      dropzone.addEventListener('drop', (e) => {
        e.preventDefault();
        dropzone.classList.remove('dragging');
        upload(e.dataTransfer.files[0]);
      });

      $('enhance').addEventListener('click', () => {
        render({ phase: 'processing' });
        call('POST', '/api/session/enhance');
      });
      $('reset').addEventListener('click', () => {
        $('file').value = '';
        call('POST', '/api/session/reset');
      });
      $('retry').addEventListener('click', () => {
        $('file').value = '';
        call('POST', '/api/session/reset');
      });
      $('format').addEventListener('change', (e) =>
        $('quality-row').classList.toggle('hidden', e.target.value !== 'jpeg')
      );
      $('quality').addEventListener('input', (e) => {
        $('quality-value').textContent = e.target.value;
      });
      $('download').addEventListener('click', () => {
        const params = new URLSearchParams({
          format: $('format').value,
          quality: $('quality').value,
        });
        window.location.href = '/api/session/download?' + params.toString();
      });

      call('GET', '/api/session');
    </script>
  </body>
</html>
"""
